"""Read DNS packets: header, questions and resource records."""

__version__ = "0.1.0"
__all__ = ["buffer", "result_code", "query_type", "header", "question", "record"]