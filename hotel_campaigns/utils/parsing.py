"""
Structured response validation for model output

Each node declares its expected output as a pydantic model. The same model
produces the format instructions embedded in the prompt and validates the
model's answer. Validation never raises: a bad answer comes back as a
ShapeMismatch so the node can apply its own fallback policy.
"""

import json
from dataclasses import dataclass
from typing import Type, TypeVar, Union

from langchain_core.exceptions import OutputParserException
from langchain_core.messages import BaseMessage
from langchain_core.output_parsers import JsonOutputParser
from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class ShapeMismatch:
    """Model text did not match the declared schema"""
    schema_name: str
    reason: str
    raw: str


def format_instructions(schema: Type[BaseModel]) -> str:
    """Prompt text describing the JSON shape the model must return"""
    return JsonOutputParser(pydantic_object=schema).get_format_instructions()


def parse_structured(text: str, schema: Type[T]) -> Union[T, ShapeMismatch]:
    """
    Validate raw model text against a schema.

    Args:
        text: Raw completion text (bare JSON or JSON inside a markdown fence)
        schema: Pydantic model describing the expected shape

    Returns:
        A schema instance on success, otherwise a ShapeMismatch
    """
    try:
        data = JsonOutputParser().parse(text)
    except OutputParserException as e:
        return ShapeMismatch(schema.__name__, f"invalid JSON: {e}", text)

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        return ShapeMismatch(schema.__name__, f"{e.error_count()} validation error(s): {e}", text)


def message_text(message: BaseMessage) -> str:
    """Flatten message content (plain string or list of content parts) to text"""
    content = message.content
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for item in content:
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, dict) and item.get("type") == "text":
                parts.append(item.get("text", ""))
            else:
                parts.append(json.dumps(item))
        return " ".join(parts)
    return json.dumps(content)
