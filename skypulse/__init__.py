"""SkyPulse weather backend."""
