"""Common utilities shared across input and output processing."""

from worksheet.common.utils import (
    split_characters,
    simplified_to_traditional,
    _load_env_file,
)
from worksheet.common.logging import (
    log_debug,
    log_verbose,
    log_warn,
    log_error,
)
from worksheet.common.errors import (
    WorksheetError,
    ConfigurationError,
    AssetLoadError,
    TranslationError,
    TranslationRequestError,
    EmptyResponseError,
    TranslationParseError,
    LayoutError,
    OutputWriteError,
)
from worksheet.common.config import WorksheetConfig, load_config
from worksheet.common.openai import OpenRouterClient

__all__ = [
    # utils
    "split_characters",
    "simplified_to_traditional",
    "_load_env_file",
    # logging
    "log_debug",
    "log_verbose",
    "log_warn",
    "log_error",
    # errors
    "WorksheetError",
    "ConfigurationError",
    "AssetLoadError",
    "TranslationError",
    "TranslationRequestError",
    "EmptyResponseError",
    "TranslationParseError",
    "LayoutError",
    "OutputWriteError",
    # config
    "WorksheetConfig",
    "load_config",
    # openai
    "OpenRouterClient",
]
