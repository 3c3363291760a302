from .batch import BatchJob, BatchRequest, parse_background, parse_border, plan_batch
from .common import BackgroundDefinition, parse_size, split_respecting_quotes, split_text_override
from .url import parse_url

__all__ = [
    "BatchJob",
    "BatchRequest",
    "parse_background",
    "parse_border",
    "plan_batch",
    "BackgroundDefinition",
    "parse_size",
    "split_respecting_quotes",
    "split_text_override",
    "parse_url",
]
