"""
Resume analysis service.

Tries the remote collaborator first and falls back to the local heuristics
only when the collaborator itself fails. Validation and read errors are
raised to the caller unchanged.
"""
from __future__ import annotations
import asyncio
import random
from pathlib import Path
from typing import Optional, Union

from skillmatch.config.models import LatencyCfg, ValidationCfg
from skillmatch.errors import CollaboratorError, ResumeReadError
from skillmatch.observability import get_logger, counter, AnalysisMetrics
from skillmatch.resume.analysis import ResumeAnalyzer
from skillmatch.resume.models import MLAnalysis, ParsedResume, ResumeAnalysis
from skillmatch.resume.parser import ResumeParser
from skillmatch.services.backends import ResumeBackend
from skillmatch.services.http import run_blocking
from skillmatch.validation import validate_resume_upload

logger = get_logger(__name__)


def record_fallback(operation: str, error: CollaboratorError) -> None:
    counter(AnalysisMetrics.REMOTE_FALLBACK, tags={"operation": operation})
    logger.warning("Remote collaborator failed, using local fallback",
                   operation=operation, error=str(error))


class ResumeService:
    """Parse and analyze uploaded resumes"""

    def __init__(
        self,
        parser: ResumeParser,
        analyzer: ResumeAnalyzer,
        rng: random.Random,
        backend: Optional[ResumeBackend] = None,
        latency: Optional[LatencyCfg] = None,
        validation: Optional[ValidationCfg] = None,
    ):
        self.parser = parser
        self.analyzer = analyzer
        self.rng = rng
        self.backend = backend
        self.latency = latency or LatencyCfg()
        self.validation = validation or ValidationCfg()

    async def parse_resume(
        self,
        content: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> ParsedResume:
        validate_resume_upload(filename, len(content), content_type,
                               max_bytes=self.validation.max_resume_bytes)

        if self.backend is not None:
            try:
                return await run_blocking(self.backend.parse, content, filename, content_type)
            except CollaboratorError as e:
                record_fallback("parse", e)

        await asyncio.sleep(self.latency.parse)
        return self.parser.parse_bytes(content, filename, content_type)

    async def generate_analysis(self, resume: ParsedResume) -> MLAnalysis:
        if self.backend is not None:
            try:
                return await run_blocking(self.backend.analyze, resume)
            except CollaboratorError as e:
                record_fallback("analyze", e)

        await asyncio.sleep(self.latency.analysis)
        return self.analyzer.analyze(resume, self.rng)

    async def analyze_resume(
        self,
        content: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> ResumeAnalysis:
        """Parse then analyze, returning the combined view"""
        parsed = await self.parse_resume(content, filename, content_type)
        analysis = await self.generate_analysis(parsed)
        logger.info("Resume analysis complete", filename=filename,
                    skills=len(parsed.skills), level=analysis.experience_level.value)
        return ResumeAnalysis.from_parsed(parsed, analysis)

    async def analyze_file(self, path: Union[str, Path]) -> ResumeAnalysis:
        path = Path(path)
        try:
            content = path.read_bytes()
        except OSError as e:
            raise ResumeReadError(path.name, str(e)) from e
        return await self.analyze_resume(content, path.name)
