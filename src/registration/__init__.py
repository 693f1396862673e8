"""Registration bounded context: push-token directory for device registration.

Mobile clients register or unregister an opaque push token; a broadcast
component reads the directory to fan out notifications.
"""
