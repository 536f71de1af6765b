"""
LLM prompt generator: build the Ask/Tell/Reveal instruction, call the text generator once,
extract and validate the JSON in its reply. Any failure (no client, network/auth error,
unparsable text, wrong structure) returns the static fallback set; generate() never raises.
"""
import json
import logging
import random
import time

import json_repair
from pydantic import ValidationError

from app.llm.base import TextGenerator
from app.schemas.prompt import GamePrompts
from app.services.fallback_prompts import CLASSROOM_TOPIC, fallback_prompts

logger = logging.getLogger(__name__)

SEED_MAX = 9_999_999

# Vocabulary guidance per CEFR level, injected into the instruction
LEVEL_GUIDANCE = {
    "B1": "Use simple, everyday vocabulary and common expressions.",
    "B1+": "Use everyday vocabulary with a few less common words and simple linking phrases.",
    "B2": "Use some idiomatic expressions and more varied vocabulary.",
    "B2+": "Use idiomatic expressions, varied vocabulary and some complex sentences.",
    "C1": "Use more sophisticated vocabulary and complex language structures.",
    "C2": "Use nuanced vocabulary, abstract concepts and specialized terminology.",
}

CLASSROOM_GUIDANCE = """SPECIAL INSTRUCTIONS FOR "Your Class" TOPIC:
- Focus SPECIFICALLY on interesting and funny classroom relationships and dynamics
- Include prompts about:
  * Humorous teacher-student interactions and misunderstandings
  * Funny classroom incidents and memorable moments
  * Interesting or unusual classmate personalities and relationships
  * Amusing group dynamics during class activities
  * Entertaining classroom traditions or inside jokes
- Make prompts lighthearted, humorous and engaging
- Focus on RELATIONSHIPS between people, not just academic topics"""

RESPONSE_SCHEMA = """{
  "stages": [
    {"stage": "Ask", "question": "[Short instruction text]", "context": "[Very brief context]", "hintWords": ["w1", "w2", "w3", "w4", "w5"]},
    {"stage": "Tell", "question": "[Short statement instruction, NOT a question]", "context": "[Very brief context]", "hintWords": ["w1", "w2", "w3", "w4", "w5"]},
    {"stage": "Reveal", "question": "[Short personal question]", "context": "[Very brief context]", "hintWords": ["w1", "w2", "w3", "w4", "w5"]}
  ]
}"""


class GenerationError(Exception):
    """LLM reply could not be turned into a valid GamePrompts."""


def build_instruction(level: str, topic_name: str, seed: int) -> str:
    """Instruction text for one Ask/Tell/Reveal set at the given CEFR level."""
    guidance = LEVEL_GUIDANCE.get(level, LEVEL_GUIDANCE["B1"])
    special = CLASSROOM_GUIDANCE if topic_name == CLASSROOM_TOPIC else ""
    return f"""Create a COMPLETELY UNIQUE set of ESL speaking practice prompts for the "Ask, Tell, Reveal" activity format at CEFR level {level} about the topic "{topic_name}". Random seed: {seed}

{special}

CRITICAL REQUIREMENT: The three prompts MUST be very different from each other:
- Focus on different aspects of the "{topic_name}" topic with no thematic overlap
- Use different vocabulary domains and hint words
- Address different time periods (past/present/future) when appropriate
- Cover different emotional contexts (positive/neutral/challenging)

CEFR REQUIREMENTS:
- Keep every prompt SHORT and SIMPLE (maximum 20 words)
- Level {level}: {guidance}

Use the random seed {seed} to create a variation unlike any set you have produced before.

Stages, in this exact order:
1. "Ask": instruct the student to ask ANOTHER student a specific question. Begin with "Ask your partner about..." or similar.
2. "Tell": a STATEMENT, not a question. Begin with "Tell your partner about..." or similar.
3. "Reveal": a question that encourages the student to share something personal or unique.

For each stage provide a clear instruction, a very brief context (maximum 15 words), and exactly 5 hint words suitable for level {level}, different from the other stages.

Respond with a single valid JSON object and nothing else, using this structure:
{RESPONSE_SCHEMA}
"""


def _fenced_block(text: str) -> str | None:
    """Body of the first ``` fenced block (```json or bare), or None."""
    start = text.find("```")
    if start == -1:
        return None
    body_start = text.find("\n", start)
    if body_start == -1:
        return None
    header = text[start + 3 : body_start].strip().lower()
    if header not in ("", "json"):
        return None
    end = text.find("```", body_start)
    if end == -1:
        return None
    return text[body_start + 1 : end].strip()


def _balanced_object(text: str) -> str | None:
    """First top-level {...} span, skipping braces inside string literals; None if unbalanced."""
    start = text.find("{")
    if start == -1:
        return None
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start : i + 1]
    return None


def extract_json_object(text: str) -> str:
    """Locate the JSON object in a model reply: fenced code block first, then first balanced {...}."""
    if not text or not text.strip():
        raise GenerationError("empty response")
    fenced = _fenced_block(text)
    if fenced and fenced.lstrip().startswith("{"):
        return fenced
    span = _balanced_object(fenced or text)
    if span is None and fenced:
        span = _balanced_object(text)
    if span is None:
        start = text.find("{")
        if start == -1:
            raise GenerationError("no JSON object found in response")
        # Unterminated object (cut off at the token limit); parse_game_prompts attempts a repair
        span = text[start:].rstrip().rstrip("`").strip()
    return span


def parse_game_prompts(text: str) -> GamePrompts:
    """Extract, decode and structurally validate a reply. Raises GenerationError."""
    candidate = extract_json_object(text)
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        try:
            repaired = json_repair.loads(candidate)
        except Exception:
            repaired = None
        if not isinstance(repaired, dict) or not repaired:
            raise GenerationError(f"invalid JSON: {e}") from e
        logger.info("Prompt JSON needed repair: %s", e)
        data = repaired
    if not isinstance(data, dict):
        raise GenerationError("top-level JSON value is not an object")
    try:
        return GamePrompts.model_validate(data)
    except ValidationError as e:
        raise GenerationError(f"unexpected structure: {e.error_count()} error(s)") from e


class PromptGenerator:
    """Generate an Ask/Tell/Reveal set for (level, topic name), falling back to static prompts on any failure."""

    def __init__(self, text_generator: TextGenerator | None, rng: random.Random | None = None) -> None:
        self._text_generator = text_generator
        self._rng = rng or random.Random()

    def generate(self, level: str, topic_name: str) -> GamePrompts:
        seed = self._rng.randint(0, SEED_MAX)
        logger.info("Generating prompts: level=%s, topic=%s, seed=%s", level, topic_name, seed)
        if self._text_generator is None:
            logger.warning("No LLM configured; serving fallback prompts for topic=%s", topic_name)
            return fallback_prompts(topic_name)
        instruction = build_instruction(level, topic_name, seed)
        t_start = time.perf_counter()
        try:
            raw = self._text_generator.generate_text(instruction)
            prompts = parse_game_prompts(raw)
        except Exception as e:
            logger.warning(
                "Prompt generation failed after %.2fs (%s: %s); serving fallback prompts for topic=%s",
                time.perf_counter() - t_start,
                type(e).__name__,
                e,
                topic_name,
            )
            return fallback_prompts(topic_name)
        logger.info("Prompt generation OK in %.2fs", time.perf_counter() - t_start)
        return prompts
