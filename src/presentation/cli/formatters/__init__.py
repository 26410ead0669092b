from .output_formatter import OutputFormatter

__all__ = ['OutputFormatter']
