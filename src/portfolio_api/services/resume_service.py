"""
Resume Service
Renders a stored researcher profile as a printable HTML resume.

Rendering is a pure function of one profile record: list-valued fields are
already deserialized by the repository, every interpolated value is escaped,
and empty sections are left out.
"""

from html import escape
from string import Template
from typing import Any, Dict, Iterable, List, Optional
import logging

logger = logging.getLogger("RESUME_SERVICE")


PAGE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Resume - $title</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body { font-family: Georgia, serif; line-height: 1.6; color: #333; background: #f5f5f5; padding: 20px; }
    .container { max-width: 900px; margin: 0 auto; background: white; padding: 50px; box-shadow: 0 0 20px rgba(0,0,0,0.1); }
    .header { text-align: center; border-bottom: 3px solid #4f46e5; padding-bottom: 20px; margin-bottom: 30px; }
    .header h1 { font-size: 2.5rem; color: #1a1a1a; margin-bottom: 10px; }
    .header .designation { font-size: 1.3rem; color: #4f46e5; font-weight: 600; margin-bottom: 15px; }
    .header .institution { font-size: 1.1rem; color: #666; margin-bottom: 15px; }
    .contact-info { display: flex; justify-content: center; flex-wrap: wrap; gap: 20px; font-size: 0.95rem; color: #666; }
    .section { margin-bottom: 30px; }
    .section-title { font-size: 1.5rem; color: #4f46e5; border-bottom: 2px solid #e5e7eb; padding-bottom: 8px; margin-bottom: 15px; text-transform: uppercase; letter-spacing: 1px; }
    .item { margin-bottom: 20px; }
    .item-header { display: flex; justify-content: space-between; align-items: baseline; margin-bottom: 5px; }
    .item-title { font-weight: 700; font-size: 1.1rem; color: #1a1a1a; }
    .item-subtitle { font-style: italic; color: #666; margin-bottom: 5px; }
    .item-date { color: #888; font-size: 0.9rem; }
    .item-description { color: #555; margin-top: 8px; line-height: 1.7; white-space: pre-line; }
    .keywords { display: flex; flex-wrap: wrap; gap: 10px; margin-top: 10px; }
    .keyword { background: #e0e7ff; color: #4f46e5; padding: 5px 12px; border-radius: 15px; font-size: 0.9rem; }
    .print-btn { position: fixed; top: 20px; right: 20px; background: #4f46e5; color: white; border: none; padding: 12px 24px; border-radius: 8px; cursor: pointer; font-size: 1rem; font-weight: 600; }
    @media print { body { background: white; padding: 0; } .container { box-shadow: none; padding: 0; } .print-btn { display: none; } }
  </style>
</head>
<body>
  <button class="print-btn" onclick="window.print()">Print Resume</button>
  <div class="container">
    <div class="header">
      <h1>$name</h1>
      <div class="designation">$designation</div>
      $institution
      <div class="contact-info">$contact</div>
    </div>
$sections
  </div>
</body>
</html>
""")

SECTION = Template("""    <div class="section">
      <h2 class="section-title">$heading</h2>
      $body
    </div>""")

ITEM = Template("""<div class="item">
        <div class="item-header"><div class="item-title">$title</div><div class="item-date">$date</div></div>
        $subtitle$description
      </div>""")

NOT_FOUND_PAGE = """<!DOCTYPE html>
<html>
<head>
  <title>Resume Not Available</title>
  <style>
    body { font-family: Arial, sans-serif; padding: 50px; text-align: center; }
    h1 { color: #ef4444; }
  </style>
</head>
<body>
  <h1>Profile Not Found</h1>
  <p>Please complete your profile first before generating a resume.</p>
  <button onclick="window.close()">Close</button>
</body>
</html>
"""

ERROR_PAGE = "<!DOCTYPE html><html><body><h1>Error</h1><p>The resume could not be generated.</p></body></html>"


def _text(value: Any) -> str:
    """Escaped text for any stored value; None becomes empty."""
    if value is None:
        return ""
    return escape(str(value).strip())


def _field(entry: Any, *keys: str) -> str:
    """First non-empty value among ``keys`` of a list entry, escaped."""
    if not isinstance(entry, dict):
        return ""
    for key in keys:
        if entry.get(key):
            return _text(entry[key])
    return ""


def _paragraph(value: Any) -> str:
    text = _text(value)
    return f'<p class="item-description">{text}</p>' if text else ""


def _section(heading: str, body: str) -> str:
    return SECTION.substitute(heading=escape(heading), body=body) if body else ""


def _items(entries: Iterable[Any], title_keys, subtitle_keys, date_keys, description_keys=("description",)) -> str:
    rendered = []
    for entry in entries or []:
        if not isinstance(entry, dict):
            entry = {title_keys[0]: entry}
        title = _field(entry, *title_keys)
        subtitle = _field(entry, *subtitle_keys)
        date = _field(entry, *date_keys)
        description = _field(entry, *description_keys)
        if not (title or subtitle or date or description):
            continue
        rendered.append(ITEM.substitute(
            title=title,
            date=date,
            subtitle=f'<div class="item-subtitle">{subtitle}</div>' if subtitle else "",
            description=f'<p class="item-description">{description}</p>' if description else "",
        ))
    return "\n      ".join(rendered)


def _degree_items(degrees: List[Any]) -> str:
    rendered = []
    for degree in degrees or []:
        if not isinstance(degree, dict):
            degree = {"degree": degree}
        title = _field(degree, "degree", "title")
        specialization = _field(degree, "specialization", "field")
        if specialization:
            title = f"{title} in {specialization}" if title else specialization
        subtitle = _field(degree, "institution", "university")
        year = _field(degree, "year", "date")
        if not (title or subtitle or year):
            continue
        rendered.append(ITEM.substitute(
            title=title,
            date=year,
            subtitle=f'<div class="item-subtitle">{subtitle}</div>' if subtitle else "",
            description="",
        ))
    return "\n      ".join(rendered)


def _keywords(keywords: Optional[str]) -> str:
    chips = [
        f'<span class="keyword">{escape(keyword.strip())}</span>'
        for keyword in (keywords or "").split(",")
        if keyword.strip()
    ]
    return f'<div class="keywords">{"".join(chips)}</div>' if chips else ""


def _contact_line(profile: Dict[str, Any]) -> str:
    parts = []
    if profile.get("official_email"):
        parts.append(f"<span>Email: {_text(profile['official_email'])}</span>")
    if profile.get("phone"):
        parts.append(f"<span>Phone: {_text(profile['phone'])}</span>")
    if profile.get("website"):
        website = _text(profile["website"])
        parts.append(f'<span>Web: <a href="{website}">{website}</a></span>')
    return "\n        ".join(parts)


def render_resume(profile: Dict[str, Any]) -> str:
    """
    Render a complete HTML5 resume document.

    Args:
        profile: Profile record as returned by ``ProfileRepository.get_by_email``
            (snake_case keys, list fields already deserialized)

    Returns:
        str: HTML document
    """
    designation = _text(profile.get("designation"))
    if profile.get("department"):
        department = _text(profile["department"])
        designation = f"{designation} | {department}" if designation else department

    institution = _text(profile.get("institution"))

    research = _paragraph(profile.get("research_description")) + _keywords(profile.get("research_keywords"))

    sections = [
        _section("Research Interests", research),
        _section("Education", _degree_items(profile.get("degrees"))),
        _section("Employment", _items(
            profile.get("employment"),
            ("position", "title", "role"), ("organization", "institution", "employer"),
            ("duration", "years", "period", "year"),
        )),
        _section("Teaching", _items(
            profile.get("courses"),
            ("title", "name", "course"), ("code", "level"), ("semester", "year", "term"),
        )),
        _section("Grants", _items(
            profile.get("grants"),
            ("title", "name"), ("agency", "funder", "role"), ("year", "duration", "period"),
            ("amount", "description"),
        )),
        _section("Awards", _items(
            profile.get("awards"),
            ("title", "name", "award"), ("organization", "by", "institution"), ("year", "date"),
        )),
        _section("Professional Activities", _paragraph(profile.get("professional_activities"))),
        _section("Skills", _paragraph(profile.get("skills"))),
        _section("Outreach & Service", _paragraph(profile.get("outreach_service"))),
    ]

    name = _text(profile.get("full_name"))
    html = PAGE.substitute(
        title=name or "Academic Professional",
        name=name or "Name Not Provided",
        designation=designation,
        institution=f'<div class="institution">{institution}</div>' if institution else "",
        contact=_contact_line(profile),
        sections="\n".join(section for section in sections if section),
    )
    logger.debug(f"Rendered resume for {profile.get('user_email')}")
    return html


def render_not_found() -> str:
    """Page served with 404 when the owner has no profile yet."""
    return NOT_FOUND_PAGE


def render_error() -> str:
    return ERROR_PAGE
