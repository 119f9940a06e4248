from langgraph.graph import StateGraph, START, END

from src.client import OllamaClient
from src.logger import LogSink
from src.models import CommandState
from nodes.analyze import analyze
from nodes.normalize import normalize
from nodes.present import present_node


def create_graph(client: OllamaClient, sink: LogSink):
    """
    Create the command workflow graph: analyze → normalize → present.

    Args:
        client: Inference client used by the analyze node
        sink: Session log shared by the analyze and present nodes
    """
    # Initialize graph with state schema
    workflow = StateGraph(CommandState)

    # Add nodes
    workflow.add_node("analyze", lambda state: analyze(state, client, sink))
    workflow.add_node("normalize", normalize)
    workflow.add_node("present", lambda state: present_node(state, sink))

    # Add edges
    workflow.add_edge(START, "analyze")
    workflow.add_conditional_edges(
        "analyze",
        lambda state: END if state["status"] == "failed" else "normalize",
        {END: END, "normalize": "normalize"},
    )
    workflow.add_edge("normalize", "present")
    workflow.add_edge("present", END)

    return workflow.compile()
