"""
Prompt templates for CommandBot.
"""

from prompts.prompt_analyze import ANALYSIS_INSTRUCTIONS, build_prompt

__all__ = [
    "ANALYSIS_INSTRUCTIONS",
    "build_prompt",
]
