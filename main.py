import argparse
import sys
from dotenv import load_dotenv

load_dotenv()

from src.client import OllamaClient
from src.graph import create_graph
from src.logger import LogSink, open_log_sink
from settings import LOG_FILE

EXIT_COMMAND = "exit"


def run_command(graph, user_input: str, sink: LogSink) -> bool:
    """
    Run one command through the graph and report any failure on one line.

    Returns:
        bool: True if the analysis was presented, False otherwise
    """
    initial_state = {
        "user_input": user_input,
        "analysis": None,
        "raw_response": None,
        "error": None,
        "status": "pending",
    }

    try:
        final_state = graph.invoke(initial_state)
    except Exception as e:
        # Anything the nodes didn't anticipate still must not end the session
        sink.error(f"Unexpected error: {type(e).__name__}: {e}")
        print(f"Error: {e}")
        return False

    if final_state["status"] == "failed":
        print(f"Error: {final_state['error']}")
        return False

    return True


def chat_loop(graph, sink: LogSink) -> None:
    """Read commands until "exit" or end of input."""
    print("\nCommandBot")

    while True:
        try:
            user_input = input("command: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if user_input == EXIT_COMMAND:
            break
        if not user_input:
            continue

        run_command(graph, user_input, sink)


def main():
    parser = argparse.ArgumentParser(
        description="Analyze work commands with a local Ollama model",
        epilog='Type a command at the prompt, or "exit" to quit.'
    )
    parser.parse_args()

    try:
        sink = open_log_sink(LOG_FILE)
    except OSError as e:
        print(f"Error: Could not open log file {LOG_FILE}: {e}", file=sys.stderr)
        sys.exit(1)

    with sink:
        sink.log_session_start()
        try:
            graph = create_graph(OllamaClient(), sink)
            chat_loop(graph, sink)
        finally:
            sink.log_session_end()


if __name__ == "__main__":
    main()
