"""
Test settings - sets DEBUG=False and quiets the arena loggers for tests
"""
from .settings import *

# Disable debug mode for tests
DEBUG = False

LOGGING['loggers']['arenatour']['level'] = 'WARNING'
