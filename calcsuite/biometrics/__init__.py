"""Biometric tracking package."""

from calcsuite.biometrics.log import BiometricLog

__all__ = ["BiometricLog"]
