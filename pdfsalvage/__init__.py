from pdfsalvage.extract import DEFAULT_MIN_LENGTH, ExtractionOutcome, extract_text

__all__ = ['DEFAULT_MIN_LENGTH', 'ExtractionOutcome', 'extract_text']
