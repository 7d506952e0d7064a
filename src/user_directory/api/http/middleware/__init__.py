from .activity import ActivityLogInterceptor
from .auth import TokenAuthInterceptor
from .failures import FailureTranslationInterceptor
from .pipeline import CallNext, Interceptor, InterceptorChainMiddleware

__all__ = [
    "ActivityLogInterceptor",
    "CallNext",
    "FailureTranslationInterceptor",
    "Interceptor",
    "InterceptorChainMiddleware",
    "TokenAuthInterceptor",
]
