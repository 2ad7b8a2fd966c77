from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator


def _single_line(v: str) -> str:
    if "\n" in v or "\r" in v:
        raise ValueError(f"line must not contain a line terminator: {v!r}")
    return v


class Exchange(BaseModel):
    send: str
    expect: List[str] = Field(min_length=1)

    @field_validator("send")
    @classmethod
    def _send_single_line(cls, v: str) -> str:
        return _single_line(v)

    @field_validator("expect")
    @classmethod
    def _expect_single_lines(cls, v: List[str]) -> List[str]:
        for line in v:
            _single_line(line)
        return v


class Transcript(BaseModel):
    name: str
    description: str = ""
    exchanges: List[Exchange] = Field(min_length=1)
