"""Typed view of the merged configuration"""
from __future__ import annotations
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from skillmatch.nlp.vocabulary import PARTIAL_SKILLS
from skillmatch.validation import MAX_RESUME_BYTES, MIN_JOB_DESCRIPTION_CHARS, MIN_PASSWORD_CHARS


class RemoteCfg(BaseModel):
    enabled: bool = True
    base_url: str = "http://localhost:8000/api"
    timeout: float = Field(10.0, gt=0)

    @field_validator('base_url')
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.rstrip('/')


class LatencyCfg(BaseModel):
    """Simulated delays in seconds, awaited by the async services"""
    parse: float = Field(0.0, ge=0)
    analysis: float = Field(2.0, ge=0)
    match: float = Field(3.0, ge=0)
    suggestions: float = Field(2.0, ge=0)
    save: float = Field(0.5, ge=0)
    history: float = Field(0.3, ge=0)
    demo_login: float = Field(1.0, ge=0)
    demo_signup: float = Field(1.2, ge=0)

    @classmethod
    def zero(cls) -> "LatencyCfg":
        return cls(**{name: 0.0 for name in cls.model_fields})


class StorageCfg(BaseModel):
    # None keeps everything in memory
    path: Optional[str] = "~/.skillmatch/store.json"

    def resolved_path(self) -> Optional[Path]:
        if not self.path:
            return None
        return Path(self.path).expanduser()


class MatchingCfg(BaseModel):
    partial_skills: List[str] = Field(default_factory=lambda: list(PARTIAL_SKILLS))
    min_score_threshold: int = Field(40, ge=0, le=100)
    max_results: int = Field(8, ge=1)
    fallback_results: int = Field(5, ge=1)


class ValidationCfg(BaseModel):
    max_resume_bytes: int = Field(MAX_RESUME_BYTES, ge=1)
    min_job_description_chars: int = Field(MIN_JOB_DESCRIPTION_CHARS, ge=0)
    min_password_chars: int = Field(MIN_PASSWORD_CHARS, ge=0)


class LoggingCfg(BaseModel):
    level: str = Field('INFO')

    @field_validator('level')
    @classmethod
    def _level(cls, v: str) -> str:
        allowed = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if v.upper() not in allowed:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()


class AppConfig(BaseModel):
    remote: RemoteCfg = RemoteCfg()
    latency: LatencyCfg = LatencyCfg()
    storage: StorageCfg = StorageCfg()
    matching: MatchingCfg = MatchingCfg()
    validation: ValidationCfg = ValidationCfg()
    logging: LoggingCfg = LoggingCfg()
