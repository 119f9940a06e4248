from src.models import AnalysisResult, CommandState

# Action phrases containing any of these are too vague to act on (case-sensitive)
GENERIC_ACTION_TERMS = ["have", "want", "tell", "need", "you to"]

MAX_ACTIONS = 2

# Ordered keyword table: first matching row wins
DEPARTMENT_KEYWORDS = [
    (("selling", "sales"), "Sales"),
    (("market",), "Marketing"),
    (("engineer", "technical"), "Engineering"),
    (("finance", "accounting"), "Finance"),
    (("customer",), "Customer Support"),
]


def is_generic_action(action: str) -> bool:
    return any(term in action for term in GENERIC_ACTION_TERMS)


def infer_department(user_input: str) -> str:
    """Guess a department from keywords in the command, or "" if nothing matches."""
    lowered = user_input.lower()
    for keywords, department in DEPARTMENT_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return department
    return ""


def needs_department(department) -> bool:
    return not isinstance(department, str) or not department or "unspecified" in department


def normalize_analysis(analysis: AnalysisResult, user_input: str) -> AnalysisResult:
    """
    Apply the deterministic cleanup rules to a parsed analysis.

    - Keep only the first instruction
    - Drop generic and duplicate actions, keep at most two in original order
    - Back-fill empty or placeholder departments from the command's keywords

    Returns a new AnalysisResult; the input is left untouched.
    """
    instructions = analysis.instructions[:1]

    actions = []
    for action in analysis.actions:
        if not is_generic_action(action) and action not in actions:
            actions.append(action)
    actions = actions[:MAX_ACTIONS]

    entities = {}
    for key, entity in analysis.resolved_entities.items():
        if needs_department(entity.department):
            inferred = infer_department(user_input)
            if inferred:
                entity = entity.model_copy(update={"department": inferred})
        entities[key] = entity

    return analysis.model_copy(update={
        "instructions": instructions,
        "actions": actions,
        "resolved_entities": entities,
    })


def normalize(state: CommandState) -> dict:
    """Normalize the analysis produced by the analyze node."""
    return {
        "analysis": normalize_analysis(state["analysis"], state["user_input"]),
        "status": "normalized",
    }
