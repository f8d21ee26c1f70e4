from .knmi_web import KnmiWebSource, OBSERVATIONS_URL

__all__ = [
    'KnmiWebSource',
    'OBSERVATIONS_URL',
]
