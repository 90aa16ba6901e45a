"""Prompt catalog: per-level tutoring prompts, tip instructions and canned fallbacks.

Every lookup accepts any level id. Unknown ids resolve to the generic entries
instead of raising, so a new level on the client never breaks the tutor.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Level:
    id: str
    title: str
    description: str
    difficulty: str


LEVELS: dict[str, Level] = {
    "1-2": Level("1-2", "Turtle Graphics 1-2", "Draw a 1x1 square using turtle commands", "Beginner"),
    "1-3": Level("1-3", "Turtle Graphics 1-3", "Draw a square using only left turns and forward moves", "Beginner"),
    "1-4": Level("1-4", "Turtle Graphics 1-4", "Draw a 3x3 grid using turtle commands", "Intermediate"),
    "2-2": Level("2-2", "Functions 2-2", "Define and call a turnAround function", "Intermediate"),
    "2-3": Level("2-3", "Functions 2-3", "Create a plus sign using functions", "Intermediate"),
}

GENERIC_SYSTEM_PROMPT = "You are a helpful coding tutor."

LEVEL_SYSTEM_PROMPTS: dict[str, str] = {
    "1-2": (
        "You are a patient coding tutor helping students learn Turtle Graphics.\n"
        "The student is working on Level 1-2: Draw a 1x1 square to the front and left of the turtle.\n"
        "Available commands: moveForward(), turnLeft()\n"
        "Rules:\n"
        "- Guide the student without giving the answer\n"
        "- Ask clarifying questions\n"
        "- Help them think through the logic\n"
        "- Encourage them when they're on the right track"
    ),
    "1-3": (
        "You are a patient coding tutor helping students learn Turtle Graphics.\n"
        "The student is working on Level 1-3: Draw a 1x1 square to the front and RIGHT using only left turns.\n"
        "Available commands: moveForward(), turnLeft() (no turnRight!)\n"
        "Rules:\n"
        "- Guide without solving\n"
        "- Help them realize multiple left turns can equal one right turn\n"
        "- Ask questions to guide their thinking"
    ),
    "1-4": (
        "You are a patient coding tutor helping students learn Turtle Graphics.\n"
        "The student is working on Level 1-4: Draw a 3x3 grid.\n"
        "Available commands: moveForward(), turnLeft()\n"
        "Rules:\n"
        "- Guide without giving code\n"
        "- Help them think about patterns and efficiency\n"
        "- Ask about loops or repetition"
    ),
    "2-2": (
        "You are a patient coding tutor helping students learn Functions.\n"
        "The student is working on Level 2-2: Define and call a turnAround() function.\n"
        "Rules:\n"
        "- Help them understand function syntax\n"
        "- Guide them to realize turning around = 180 degrees\n"
        "- Remind them functions are called before definition in this lesson"
    ),
    "2-3": (
        "You are a patient coding tutor helping students learn Functions.\n"
        "The student is working on Level 2-3: Create a plus sign using functions.\n"
        "Rules:\n"
        "- Guide them through the plus structure (4 segments)\n"
        "- Help them understand function calls\n"
        "- Ask about how to return to the starting position"
    ),
}

HINT_INSTRUCTION = (
    "IMPORTANT: The student asked for a hint. Provide ONE specific, focused hint "
    "that helps them move forward without giving away the solution."
)

TIPS_SYSTEM_PROMPT = (
    "You are an encouraging coding tutor. Provide practical tips for learning to code."
)

TIP_PROMPTS: dict[str, str] = {
    "1-2": (
        "Provide a brief welcome and 3-4 key tips for Level 1-2 (drawing a 1x1 square to the front and left).\n"
        "Focus on: understanding a square's geometry, using the available commands efficiently.\n"
        "Keep it concise and encouraging. End with \"Ready? Send your code and I'll guide you!\""
    ),
    "1-3": (
        "Provide a brief welcome and 3-4 key tips for Level 1-3 (drawing a square to the front and RIGHT using only left turns).\n"
        "Focus on: the challenge of no right turns, thinking about turning angles.\n"
        "Keep it concise. End with \"Send your code when ready!\""
    ),
    "1-4": (
        "Provide a brief welcome and 3-4 key tips for Level 1-4 (drawing a 3x3 grid).\n"
        "Focus on: grid structure, efficiency, possibly loops/patterns.\n"
        "Keep it concise. End with \"Ready? Share your code!\""
    ),
    "2-2": (
        "Provide a brief welcome and 3-4 key tips for Level 2-2 (defining a turnAround function).\n"
        "Focus on: function syntax, the goal of turning 180 degrees, remember to call before defining.\n"
        "Keep it concise. End with \"Send your code to get started!\""
    ),
    "2-3": (
        "Provide a brief welcome and 3-4 key tips for Level 2-3 (creating a plus sign with functions).\n"
        "Focus on: plus structure (4 segments), function usage, returning to start.\n"
        "Keep it concise. End with \"Share your code!\""
    ),
}

GENERIC_FALLBACK_TIPS = "Welcome! Send your code and I'll provide guidance."

FALLBACK_TIPS: dict[str, str] = {
    "1-2": (
        "Welcome to Turtle Graphics! Draw a 1x1 square to the front and left. "
        "Available commands: moveForward() and turnLeft(). Think about how many sides a square "
        "has and how many turns you need. Ready? Send your code and I'll guide you!"
    ),
    "1-3": (
        "Great! Now draw a 1x1 square to the front and RIGHT using only left turns. "
        "Available: moveForward() and turnLeft(). Consider how multiple left turns can equal "
        "one right turn. Send your code when ready!"
    ),
    "1-4": (
        "Draw a 3x3 grid using moveForward() and turnLeft(). Think about the grid structure "
        "and look for patterns. Ready? Share your code!"
    ),
    "2-2": (
        "Define a turnAround() function that rotates the turtle 180 degrees. Remember: functions "
        "are called before they are defined in this lesson. Send your code to get started!"
    ),
    "2-3": (
        "Create a plus sign centered at your starting position using functions. "
        "A plus has 4 segments. Share your code!"
    ),
}

QUOTA_FALLBACK_GUIDANCE = (
    "The AI guidance service is currently unavailable due to usage limits. However, remember "
    "the key concepts: think about the geometry of what you're drawing, test your code step by "
    "step, and don't be afraid to experiment. You're on the right track!"
)


def get_level(level: str) -> Level | None:
    return LEVELS.get(level)


def get_system_prompt(level: str) -> str:
    return LEVEL_SYSTEM_PROMPTS.get(level, GENERIC_SYSTEM_PROMPT)


def build_system_prompt(level: str, is_hint: bool = False) -> str:
    prompt = get_system_prompt(level)
    if is_hint:
        prompt = f"{prompt}\n\n{HINT_INSTRUCTION}"
    return prompt


def get_tip_prompt(level: str) -> str:
    return TIP_PROMPTS.get(level, f"Give tips for Code.org level {level} without solving it.")


def get_fallback_tips(level: str) -> str:
    return FALLBACK_TIPS.get(level, GENERIC_FALLBACK_TIPS)
