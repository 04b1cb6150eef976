from pydantic import BaseModel, field_validator, model_validator

from tordoc_kit.annotations.annotation import Annotation
from tordoc_kit.annotations.validator import parse_annotation
from tordoc_kit.dissection.delimiter import Delimiter


class DocumentFormat(BaseModel):
    """A document type: the annotations it may carry and how to cut it."""

    name: str
    description: str = ""
    annotations: list[str]
    pattern: str
    offset: int
    skip: int = 0

    class Config:
        extra = "forbid"
        frozen = True

    @field_validator("annotations")
    @classmethod
    def check_annotations(cls, lines: list[str]) -> list[str]:
        if not lines:
            raise ValueError("at least one annotation is required")
        for line in lines:
            parse_annotation(line)
        return lines

    @model_validator(mode="after")
    def check_delimiter(self) -> "DocumentFormat":
        self.delimiter().validate()
        return self

    def accepted(self) -> frozenset[Annotation]:
        return frozenset(parse_annotation(line) for line in self.annotations)

    def delimiter(self) -> Delimiter:
        return Delimiter(pattern=self.pattern, offset=self.offset, skip=self.skip)
