__version__ = "0.3.0"

# Remote control interface version this client speaks.
CLIENT_VERSION = "1.1.1"
