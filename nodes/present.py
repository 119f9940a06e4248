import json
import sys
from typing import Optional, TextIO

from src.logger import LogSink
from src.models import AnalysisResult, CommandState

NO_INSTRUCTION = "No clear instruction found"
NO_ACTIONS = "No actions identified"
NO_DEPARTMENT = "Department unspecified"


def present(user_input: str, analysis: AnalysisResult, sink: LogSink, out: Optional[TextIO] = None) -> None:
    """
    Print the analysis summary and mirror its fields to the session log.

    Args:
        user_input: The command as typed
        analysis: Normalized analysis
        sink: Session log
        out: Console stream (default sys.stdout)
    """
    out = out or sys.stdout

    print("\nChat-Bot:", file=out)

    print("Instructions:", file=out)
    if analysis.instructions:
        print(f"- {analysis.instructions[0]}", file=out)
    else:
        print(f"- {NO_INSTRUCTION}", file=out)

    print("\nActions:", file=out)
    if analysis.actions:
        for action in analysis.actions:
            print(f"- {action}", file=out)
    else:
        print(f"- {NO_ACTIONS}", file=out)

    if analysis.resolved_entities:
        print("\nContext:", file=out)
        for key, entity in analysis.resolved_entities.items():
            name = entity.name if entity.name is not None else key
            department = entity.department if entity.department is not None else NO_DEPARTMENT
            print(f"- {name}: {department}", file=out)
    print(file=out)

    sink.info(f"User: {user_input}")
    sink.info(f"Instructions: {json.dumps(analysis.instructions)}")
    sink.info(f"Actions: {json.dumps(analysis.actions)}")
    if analysis.resolved_entities:
        context = {key: entity.model_dump() for key, entity in analysis.resolved_entities.items()}
        sink.info(f"Context: {json.dumps(context)}")


def present_node(state: CommandState, sink: LogSink) -> dict:
    """Graph node wrapper around present()."""
    present(state["user_input"], state["analysis"], sink)
    return {"status": "presented"}
