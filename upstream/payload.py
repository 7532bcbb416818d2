# upstream/payload.py

from dataclasses import dataclass, field

from codec.json_text import escape_json

TUTOR_PREAMBLE = (
    "You are an AI tutor specializing in {subject}. "
    "Provide clear, educational explanations. "
    "Keep responses concise and helpful."
)


@dataclass(frozen=True)
class GenerationConfig:
    """Fixed sampling parameters. Callers cannot change them."""
    temperature: float = 0.7
    max_output_tokens: int = 2048
    top_p: float = 0.95
    top_k: int = 40

    def to_json(self) -> str:
        return (
            "{"
            f'"temperature":{self.temperature!r},'
            f'"maxOutputTokens":{self.max_output_tokens},'
            f'"topP":{self.top_p!r},'
            f'"topK":{self.top_k}'
            "}"
        )


GENERATION_CONFIG = GenerationConfig()


@dataclass(frozen=True)
class UpstreamRequest:
    prompt: str
    generation: GenerationConfig = field(default=GENERATION_CONFIG)

    def to_json(self) -> str:
        """
        Serialize into the generateContent request body:
        {"contents":[{"parts":[{"text":...}]}],"generationConfig":{...}}
        """
        return (
            '{"contents":[{"parts":[{"text":"'
            + escape_json(self.prompt)
            + '"}]}],"generationConfig":'
            + self.generation.to_json()
            + "}"
        )


def build_prompt(user_question: str, subject: str) -> str:
    return TUTOR_PREAMBLE.format(subject=subject) + "\n\nQuestion: " + user_question


def build_request(user_question: str, subject: str) -> UpstreamRequest:
    return UpstreamRequest(prompt=build_prompt(user_question, subject))
