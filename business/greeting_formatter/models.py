from string import Formatter

from pydantic import BaseModel, Field, field_validator

DEFAULT_GREETING_TEMPLATE = "Hello, {name}! Welcome to our program."


class GreetingTemplate(BaseModel):
    """Model representing the greeting template.

    The template is a ``str.format`` pattern whose only replacement field is
    ``{name}``. Escaped braces (``{{name}}``) do not count as the field.
    """
    template: str = Field(DEFAULT_GREETING_TEMPLATE, description="Greeting pattern with a {name} placeholder")

    @field_validator("template")
    @classmethod
    def validate_placeholder(cls, v: str) -> str:
        try:
            parsed = [(field, spec) for _, field, spec, _ in Formatter().parse(v) if field is not None]
        except ValueError as e:
            raise ValueError(f"Malformed greeting template: {e}")
        fields = [field for field, _ in parsed]
        if any("{" in spec for _, spec in parsed):
            raise ValueError("Greeting template may not nest replacement fields")
        if "name" not in fields:
            raise ValueError("Greeting template must contain the {name} placeholder")
        unexpected = sorted({field for field in fields if field != "name"})
        if unexpected:
            raise ValueError(f"Greeting template may only use the {{name}} placeholder, got: {unexpected}")
        # Conversion and format spec must accept any string
        try:
            v.format(name="")
        except ValueError as e:
            raise ValueError(f"Malformed greeting template: {e}")
        return v

    def render(self, name: str) -> str:
        return self.template.format(name=name)
