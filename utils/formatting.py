"""Plain-text rendering of CV data for prompts."""

from models.cv_models import CVData


def _date_range(start: str, end, current: bool) -> str:
    end_text = "Present" if current else (end or "N/A")
    return f"{start or 'N/A'} - {end_text}"


def format_cv_data(cv_data: CVData) -> str:
    """Format CV data for prompt."""
    info = cv_data.personal_info
    lines = [
        f"Name: {info.full_name or 'N/A'}",
        f"Title: {info.title or 'N/A'}",
        f"Email: {info.email or 'N/A'}",
        f"Phone: {info.phone or 'N/A'}",
        f"Location: {info.location or 'N/A'}",
    ]

    if cv_data.summary:
        lines.append(f"\nSummary:\n{cv_data.summary}")

    if cv_data.experience:
        lines.append("\nExperience:")
        for exp in cv_data.experience:
            lines.append(
                f"  - {exp.position} at {exp.company} ({_date_range(exp.start_date, exp.end_date, exp.current)})"
            )
            if exp.description:
                lines.append(f"    {exp.description}")
            for achievement in exp.achievements:
                lines.append(f"    * {achievement}")

    if cv_data.education:
        lines.append("\nEducation:")
        for edu in cv_data.education:
            line = f"  - {edu.degree} in {edu.field} from {edu.institution}"
            line += f" ({_date_range(edu.start_date, edu.end_date, edu.current)})"
            if edu.gpa:
                line += f", GPA {edu.gpa}"
            lines.append(line)

    if cv_data.skills:
        lines.append("\nSkills:")
        for skill in cv_data.skills:
            lines.append(f"  - {skill.name} ({skill.level.label})")

    if cv_data.languages:
        lines.append("\nLanguages:")
        for language in cv_data.languages:
            lines.append(f"  - {language.name} ({language.proficiency.label})")

    if cv_data.certificates:
        lines.append("\nCertificates:")
        for cert in cv_data.certificates:
            lines.append(f"  - {cert.name}, {cert.issuer}" + (f" ({cert.date})" if cert.date else ""))

    return "\n".join(lines)
