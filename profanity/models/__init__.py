from profanity.models.scan import ScanResult, Violation

__all__ = ["ScanResult", "Violation"]
