"""
Local resume parser.

Plain-text resumes are decoded and scanned with the keyword heuristics.
PDF and DOCX uploads are not really parsed: their content is replaced by a
fixed sample resume so the rest of the pipeline has realistic input.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional, Union

from skillmatch.errors import ResumeReadError, InputValidationError
from skillmatch.nlp.extractors import SkillExtractor, ContactExtractor
from skillmatch.nlp.sections import SectionScanner
from skillmatch.observability import get_logger, timer, counter, AnalysisMetrics
from skillmatch.resume.models import Contact, ParsedResume
from skillmatch.validation import ResumeFormat, detect_format

logger = get_logger(__name__)

SAMPLE_RESUME_TEXT = """
John Doe
Software Engineer
Email: john.doe@email.com
Phone: (555) 123-4567

PROFESSIONAL SUMMARY
Experienced software engineer with 5+ years of experience in full-stack development.
Proficient in JavaScript, React, Node.js, and cloud technologies.

TECHNICAL SKILLS
• Programming Languages: JavaScript, TypeScript, Python, Java
• Frontend: React, Vue.js, HTML5, CSS3, Tailwind CSS
• Backend: Node.js, Express.js, Django, Spring Boot
• Databases: MongoDB, PostgreSQL, MySQL, Redis
• Cloud: AWS, Azure, Docker, Kubernetes
• Tools: Git, Jenkins, Webpack, Jest

PROFESSIONAL EXPERIENCE

Senior Software Engineer | TechCorp Inc. | 2021 - Present
• Led development of microservices architecture serving 1M+ users
• Implemented CI/CD pipelines reducing deployment time by 60%
• Mentored junior developers and conducted code reviews
• Technologies: React, Node.js, AWS, Docker, MongoDB

Full Stack Developer | StartupXYZ | 2019 - 2021
• Built scalable web applications using React and Node.js
• Developed REST APIs handling 10K+ daily requests
• Collaborated with cross-functional teams in Agile environment
• Technologies: JavaScript, React, Express.js, PostgreSQL

Junior Developer | WebAgency | 2018 - 2019
• Developed responsive websites and web applications
• Worked on frontend and backend development tasks
• Participated in client meetings and requirement gathering
• Technologies: HTML, CSS, JavaScript, PHP, MySQL

EDUCATION
Bachelor of Science in Computer Science
State University | 2014 - 2018
GPA: 3.7/4.0

CERTIFICATIONS
• AWS Certified Solutions Architect (2022)
• Google Cloud Professional Developer (2023)
• Certified Scrum Master (2021)
"""


class ResumeParser:
    """Heuristic parser producing a ``ParsedResume`` from raw text or an upload"""

    def __init__(
        self,
        skill_extractor: Optional[SkillExtractor] = None,
        contact_extractor: Optional[ContactExtractor] = None,
        section_scanner: Optional[SectionScanner] = None,
    ):
        self.skill_extractor = skill_extractor or SkillExtractor()
        self.contact_extractor = contact_extractor or ContactExtractor()
        self.section_scanner = section_scanner or SectionScanner()

    def parse_file(self, file_path: Union[str, Path]) -> ParsedResume:
        """Parse a resume file from disk (PDF, DOCX, TXT)"""
        file_path = Path(file_path)
        try:
            content = file_path.read_bytes()
        except OSError as e:
            raise ResumeReadError(file_path.name, str(e)) from e
        return self.parse_bytes(content, file_path.name)

    def parse_bytes(
        self,
        content: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> ParsedResume:
        return self.parse_text(self.extract_text(content, filename, content_type))

    def extract_text(
        self,
        content: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> str:
        fmt = detect_format(filename, content_type)
        if fmt is None:
            raise InputValidationError("file", f"Unsupported file type: {filename}")

        if fmt in (ResumeFormat.PDF, ResumeFormat.DOCX):
            logger.debug("Substituting sample text for binary resume", filename=filename,
                         format=fmt.value)
            return SAMPLE_RESUME_TEXT

        try:
            return content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ResumeReadError(filename, "file is not valid UTF-8 text") from e

    def parse_text(self, text: str) -> ParsedResume:
        """Run every extractor over ``text``"""
        with timer("resume.parse"):
            experience = self.section_scanner.experience(text)
            education = self.section_scanner.education(text)
            summary = self.section_scanner.summary(text)

            parsed = ParsedResume(
                text=text,
                skills=self.skill_extractor.extract_skills(text),
                experience=list(experience.lines),
                education=list(education.lines),
                contact=Contact(**self.contact_extractor.extract_contact(text)),
                summary=summary.lines[0],
                experience_fallback=experience.is_fallback,
                education_fallback=education.is_fallback,
                summary_fallback=summary.is_fallback,
            )

        for section, result in (("experience", experience), ("education", education),
                                ("summary", summary)):
            if result.is_fallback:
                counter(AnalysisMetrics.SECTION_FALLBACK, tags={"section": section})
        counter(AnalysisMetrics.RESUME_PARSED)
        logger.info("Parsed resume", skills=len(parsed.skills),
                    experience_lines=len(parsed.experience),
                    education_lines=len(parsed.education))
        return parsed


def create_resume_parser() -> ResumeParser:
    """Factory function to create the local resume parser"""
    return ResumeParser()
