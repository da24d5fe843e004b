from pluginwatch.core.time.abc import Time
from pluginwatch.core.time.real import RealTime

__all__ = ["RealTime", "Time"]
