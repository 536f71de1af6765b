"""
Static prompt sets served when generation fails or no LLM is configured.
Total: every topic name gets a valid Ask/Tell/Reveal set.
"""
from app.schemas.prompt import GamePrompts, StagePrompt

CLASSROOM_TOPIC = "Your Class"

_CLASSROOM_STAGES = (
    (
        "Ask",
        "Ask your partner about a funny moment with a teacher.",
        "Think about humorous classroom situations.",
        ["amusing", "laugh", "accident", "joke", "surprise"],
    ),
    (
        "Tell",
        "Tell your partner about your class's special tradition.",
        "Share something unique your class does together.",
        ["routine", "special", "together", "memory", "bond"],
    ),
    (
        "Reveal",
        "Which classmate changes the classroom atmosphere the most?",
        "Think about someone who brings energy to the class.",
        ["lively", "energy", "change", "impact", "feel"],
    ),
)

_GENERIC_STAGES = (
    (
        "Ask",
        "Ask your partner about their best {topic} experience.",
        "Focus on a specific memory they have.",
        ["memory", "enjoy", "specific", "time", "place"],
    ),
    (
        "Tell",
        "Tell your partner about how {topic} is part of your life.",
        "Share your personal connection to the topic.",
        ["daily", "habit", "routine", "connect", "regular"],
    ),
    (
        "Reveal",
        "What surprising opinion do you have about {topic}?",
        "Share a thought others might not expect.",
        ["unusual", "different", "opinion", "surprise", "believe"],
    ),
)


def fallback_prompts(topic_name: str) -> GamePrompts:
    """Return the classroom set for "Your Class", otherwise the generic set with topic_name interpolated."""
    if topic_name == CLASSROOM_TOPIC:
        stages = [
            StagePrompt(stage=stage, question=question, context=context, hint_words=list(words))
            for stage, question, context, words in _CLASSROOM_STAGES
        ]
    else:
        stages = [
            StagePrompt(stage=stage, question=question.format(topic=topic_name), context=context, hint_words=list(words))
            for stage, question, context, words in _GENERIC_STAGES
        ]
    return GamePrompts(stages=stages)
