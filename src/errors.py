class CommandBotError(Exception):
    """Base class for failures while processing a single command."""


class TransportError(CommandBotError):
    """The inference server could not be reached."""


class EnvelopeDecodeError(CommandBotError):
    """The inference server replied with something other than a generate envelope."""


class ExtractionFailure(CommandBotError):
    """No JSON-looking payload was found in the model's text."""


class AnalysisDecodeError(CommandBotError):
    """The extracted payload does not parse as an analysis."""

    def __init__(self, message: str, raw_response: str = ""):
        super().__init__(message)
        self.raw_response = raw_response
