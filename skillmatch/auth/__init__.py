"""Demo-grade authentication with an observable auth state"""
from .models import User, AuthResponse
from .channel import AuthStateChannel
from .backend import AuthBackend, HttpAuthBackend
from .service import AuthService, DEMO_EMAIL, DEMO_PASSWORD

__all__ = [
    'User',
    'AuthResponse',
    'AuthStateChannel',
    'AuthBackend',
    'HttpAuthBackend',
    'AuthService',
    'DEMO_EMAIL',
    'DEMO_PASSWORD',
]
