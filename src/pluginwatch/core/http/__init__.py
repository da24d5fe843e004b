from pluginwatch.core.http.abc import HttpClient
from pluginwatch.core.http.real import RealHttpClient

__all__ = ["HttpClient", "RealHttpClient"]
