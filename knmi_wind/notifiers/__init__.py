from .base import DeviceNotifier
from .particle import ParticleNotifier, DeviceRejectedError, PARTICLE_API_URL

__all__ = [
    'DeviceNotifier',
    'ParticleNotifier',
    'DeviceRejectedError',
    'PARTICLE_API_URL',
]
