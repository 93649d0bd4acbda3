"""Exception types raised by the worksheet pipeline."""


class WorksheetError(Exception):
    """Base class for all worksheet errors."""


class ConfigurationError(WorksheetError):
    """Missing credential or invalid configuration value."""


class AssetLoadError(WorksheetError):
    """A font file is missing or cannot be registered."""


class TranslationError(WorksheetError):
    """Base class for failures on the translation path (never fatal)."""


class TranslationRequestError(TranslationError):
    """Transport, HTTP status or response envelope failure."""


class EmptyResponseError(TranslationError):
    """The endpoint answered but returned no choices."""


class TranslationParseError(TranslationError):
    """The model reply is missing one or more tagged lines."""


class LayoutError(WorksheetError):
    """Impossible page geometry or a failed draw call."""


class OutputWriteError(WorksheetError):
    """The PDF could not be written to disk."""
