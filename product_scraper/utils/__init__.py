"""Utils package initialization."""
from product_scraper.utils.logger import get_logger, LayerLogger, set_trace_id, get_trace_id
from product_scraper.utils.text import normalize_whitespace

__all__ = ["get_logger", "LayerLogger", "set_trace_id", "get_trace_id", "normalize_whitespace"]
