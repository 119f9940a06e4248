from prompts import build_prompt
from src.client import OllamaClient
from src.errors import CommandBotError, AnalysisDecodeError, ExtractionFailure
from src.extraction import extract_json, parse_analysis
from src.logger import LogSink
from src.models import CommandState


def analyze(state: CommandState, client: OllamaClient, sink: LogSink) -> dict:
    """
    Ask the model for an analysis of the user's command.

    Returns dict with analysis, raw_response, and status.
    Status is "analyzed", or "failed" with an error message.
    """
    raw_response = None
    try:
        raw_response = client.complete(build_prompt(state["user_input"]))

        payload = extract_json(raw_response)
        if not payload:
            raise ExtractionFailure("no valid JSON found in response")

        analysis = parse_analysis(payload, raw_response)

    except CommandBotError as e:
        sink.error(f"Command failed: {type(e).__name__}: {e}")
        if isinstance(e, AnalysisDecodeError) and e.raw_response:
            sink.error(f"Response was: {e.raw_response}")
        return {"raw_response": raw_response, "error": str(e), "status": "failed"}

    return {"analysis": analysis, "raw_response": raw_response, "status": "analyzed"}
