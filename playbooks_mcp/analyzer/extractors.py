"""
Field extractors for playbook documents

Every extractor is a pure function of the document text. Single-valued
extractors walk an ordered list of patterns and return the first one that
matches, so more specific patterns come first. List-valued extractors collect
every labeled section they find and de-duplicate in first-seen order.

Extractors never raise: no match gives None or an empty list.
"""

import re
from typing import Iterable, List, Optional

from ..schemas import Complexity, Document, PlaybookAnalysis
from .keywords import COMPLEXITY_INDICATORS, REQUIREMENT_CONTEXT_WORDS, TAG_KEYWORDS

HOURS_PER_SPRINT_POINT = 8

_NUMBER = r'(\d+(?:\.\d+)?)'
_POINT_UNITS = r'(?:story points?|sprint points?|sp|points?)'
_TIME_UNITS = r'(hours?|days?|weeks?|minutes?|hrs?)'
_TIME_LABELS = r'(?:estimate|estimation|time|duration|effort)'
# Label body: rest of the line plus any directly following bullet lines
_SECTION_BODY = r'[\s\n]*[:]\s*([^\n]+(?:\n[-*]\s*[^\n]+)*)'

SPRINT_POINT_PATTERNS = [
    re.compile(_POINT_UNITS + r'[\s:]*' + _NUMBER, re.IGNORECASE),
    re.compile(_NUMBER + r'\s*' + _POINT_UNITS + r'\b', re.IGNORECASE),
]

ESTIMATION_PATTERNS = SPRINT_POINT_PATTERNS + [
    re.compile(_TIME_LABELS + r'[\s:]*' + _NUMBER + r'\s*' + _TIME_UNITS, re.IGNORECASE),
    re.compile(_NUMBER + r'\s*' + _TIME_UNITS + r'\s*' + _TIME_LABELS, re.IGNORECASE),
    re.compile(r'(?:takes?|require[ds]?|need[s]?)\s*(?:about|around|approximately)?\s*'
               + _NUMBER + r'\s*' + _TIME_UNITS, re.IGNORECASE),
    re.compile(_NUMBER + r'\s*(story points?|sprint points?|sp|points?|hours?|hrs?|days?|weeks?)\b',
               re.IGNORECASE),
]

TITLE_ESTIMATION_PATTERN = re.compile(
    r'\[' + _NUMBER + r'\s*(h|hr|hrs|hours?|d|days?|w|weeks?|sp|points?)\]', re.IGNORECASE
)

_PARAGRAPH_BODY = r'[\s\n]*[:]\s*([^\n]+(?:\n(?!#+|[-*]|\d+\.)[^\n]+)*)'

DESCRIPTION_PATTERNS = [
    re.compile(r'(?:description|summary|overview)' + _PARAGRAPH_BODY, re.IGNORECASE),
    re.compile(r'(?:what|purpose|goal)' + _PARAGRAPH_BODY, re.IGNORECASE),
]

REQUIREMENT_PATTERNS = [
    re.compile(r'(?:requirements?|prerequisites?|dependencies|needed)' + _SECTION_BODY, re.IGNORECASE),
    re.compile(r'(?:must have|required|necessary)' + _SECTION_BODY, re.IGNORECASE),
    re.compile(r'(?:before starting|pre-reqs?|setup)' + _SECTION_BODY, re.IGNORECASE),
]

PREREQUISITE_PATTERNS = [
    re.compile(r'prerequisites?' + _SECTION_BODY, re.IGNORECASE),
    re.compile(r'before\s+starting' + _SECTION_BODY, re.IGNORECASE),
    re.compile(r'dependencies' + _SECTION_BODY, re.IGNORECASE),
    re.compile(r'requires?' + _SECTION_BODY, re.IGNORECASE),
    re.compile(r'must\s+have' + _SECTION_BODY, re.IGNORECASE),
]

BULLET_LINE_PATTERN = re.compile(r'^[ \t]*[-*][ \t]+([^\n]+)$', re.MULTILINE)
ITEM_SPLIT_PATTERN = re.compile(r'\n[-*]\s*|\n\d+\.\s*')
ITEM_MARKER_PATTERN = re.compile(r'^(?:[-*]|\d+\.)\s*')

EXPLICIT_TAG_PATTERN = re.compile(r'\b(?:tags?|categories|category|labels?)\s*:\s*([^\n]+)', re.IGNORECASE)
HASHTAG_PATTERN = re.compile(r'(?<!\S)#(\w+)')
TAG_SPLIT_PATTERN = re.compile(r'[,\s]+')

HOUR_PATTERNS = [
    re.compile(_NUMBER + r'\s*hours?', re.IGNORECASE),
    re.compile(_NUMBER + r'\s*hrs?', re.IGNORECASE),
    re.compile(_NUMBER + r'\s*h\b', re.IGNORECASE),
    re.compile(r'hours?[\s:]*' + _NUMBER, re.IGNORECASE),
    re.compile(r'duration[\s:]*' + _NUMBER + r'\s*hours?', re.IGNORECASE),
]

TIMING_PATTERNS = [
    re.compile(r'(?:timing|timeline|timeframe)[\s:]*([^\n]+)', re.IGNORECASE),
    # Phrases only; "takes:" labels and "take?" questions belong to later patterns
    re.compile(r'(?:takes?|requires?)\s*(?:about|around|approximately)?\s*'
               r'([^\n?:]+?(?:hours?|days?|weeks?|months?))', re.IGNORECASE),
    re.compile(r'completion\s*time[\s:]*([^\n]+)', re.IGNORECASE),
    re.compile(r'duration[\s:]*([^\n]+)', re.IGNORECASE),
    re.compile(r'implementation\s*takes?[\s:]*([^\n?]+)', re.IGNORECASE),
    re.compile(r'how\s*long[\s:]*(.*?)(?:\n|$)', re.IGNORECASE),
]

# Left behind when "how long does the playbook implementation take?" is used as a label
TIMING_BOILERPLATE = re.compile(r'^does\s+the\s+playbook\s+implementation\s+take\??\s*', re.IGNORECASE)

def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)

def format_sprint_points(points: str) -> str:
    """'5' -> '5 sprint points (40 hours)'"""
    hours = float(points) * HOURS_PER_SPRINT_POINT
    return f"{points} sprint points ({_format_number(hours)} hours)"

def _is_point_unit(unit: str) -> bool:
    unit = unit.lower()
    return 'point' in unit or unit == 'sp'

def _unique(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))

def _section_items(content: str, patterns: List[re.Pattern]) -> List[str]:
    """Collect bullet/numbered items from every labeled section"""
    items = []
    for pattern in patterns:
        for match in pattern.finditer(content):
            section = match.group(1).strip()
            for item in ITEM_SPLIT_PATTERN.split(section):
                item = ITEM_MARKER_PATTERN.sub('', item.strip()).strip()
                if item:
                    items.append(item)
    return items

def extract_estimation(content: str, name: str) -> Optional[str]:
    """
    Effort estimate from content, falling back to a [2h]-style title tag

    Args:
        content: Lower-cased document content
        name: Lower-cased document title

    Returns:
        Estimate as written ("3 days"), sprint points with their hour
        equivalent, or None
    """
    for pattern in ESTIMATION_PATTERNS:
        match = pattern.search(content)
        if match:
            groups = match.groups()
            value = groups[0]
            unit = groups[1] if len(groups) > 1 and groups[1] else 'points'
            if _is_point_unit(unit):
                return format_sprint_points(value)
            return f"{value} {unit}"

    title_match = TITLE_ESTIMATION_PATTERN.search(name)
    if title_match:
        value, unit = title_match.groups()
        if _is_point_unit(unit):
            return format_sprint_points(value)
        return re.sub(r'[\[\]]', '', title_match.group(0))

    return None

def extract_description(content: str, name: str) -> Optional[str]:
    """
    Labeled description, else the first prose line, else the title

    Reads original-case content so the result is presentable.
    """
    for pattern in DESCRIPTION_PATTERNS:
        match = pattern.search(content)
        if match and match.group(1).strip():
            return match.group(1).strip()

    for line in content.split('\n'):
        if not line.strip():
            continue
        if line.startswith(('#', '*', '-')) or re.match(r'^\d+\.', line):
            continue
        if len(line) > 20:
            return line.strip()

    return name or None

def extract_requirements(content: str) -> List[str]:
    """Labeled requirement sections plus bullets that mention access/setup work"""
    requirements = _section_items(content, REQUIREMENT_PATTERNS)

    for match in BULLET_LINE_PATTERN.finditer(content):
        text = match.group(1).strip()
        if any(word in text.lower() for word in REQUIREMENT_CONTEXT_WORDS):
            requirements.append(text)

    return _unique(requirements)

def extract_tags(content: str, name: str) -> List[str]:
    """Explicit tags, #hashtags, then categories inferred from keywords"""
    tags = []

    for match in EXPLICIT_TAG_PATTERN.finditer(content):
        for tag in TAG_SPLIT_PATTERN.split(match.group(1).strip()):
            tag = tag.lstrip('#')
            if len(tag) > 1:
                tags.append(tag)

    for match in HASHTAG_PATTERN.finditer(content):
        if len(match.group(1)) > 1:
            tags.append(match.group(1))

    combined = f"{content} {name}".lower()
    for tag, keywords in TAG_KEYWORDS.items():
        if any(keyword in combined for keyword in keywords):
            tags.append(tag)

    return _unique(tags)

def score_complexity(content: str) -> dict:
    """Indicator counts per bucket, including the length bonus"""
    lowered = content.lower()
    scores = {
        level: sum(lowered.count(indicator) for indicator in indicators)
        for level, indicators in COMPLEXITY_INDICATORS.items()
    }

    if len(content) > 2000:
        scores['high'] += 1
    elif len(content) > 500:
        scores['medium'] += 1
    else:
        scores['low'] += 1

    return scores

def assess_complexity(content: str) -> Complexity:
    """
    Highest-scoring bucket; ties go to high, then medium, then low

    Returns "unknown" only when every bucket scores zero.
    """
    scores = score_complexity(content)
    best = max(scores.values())
    if best == 0:
        return 'unknown'

    for level in ('high', 'medium', 'low'):
        if scores[level] == best:
            return level

    return 'unknown'

def extract_hours(content: str) -> Optional[str]:
    """Hours, preferring sprint points (converted) over direct hour mentions"""
    for pattern in SPRINT_POINT_PATTERNS:
        match = pattern.search(content)
        if match:
            points = float(match.group(1))
            hours = points * HOURS_PER_SPRINT_POINT
            return f"{_format_number(hours)} hours ({_format_number(points)} sprint points)"

    for pattern in HOUR_PATTERNS:
        match = pattern.search(content)
        if match:
            return f"{match.group(1)} hours"

    return None

def extract_prerequisites(content: str) -> List[str]:
    """Items from prerequisite-style sections; may overlap with requirements"""
    return _unique(_section_items(content, PREREQUISITE_PATTERNS))

def extract_timing(content: str) -> Optional[str]:
    for pattern in TIMING_PATTERNS:
        match = pattern.search(content)
        if match and match.group(1):
            timing = TIMING_BOILERPLATE.sub('', match.group(1).strip())
            if timing:
                return timing

    return None

def analyze_document(doc: Document) -> PlaybookAnalysis:
    """
    Run every extractor over a document

    Args:
        doc: Fetched playbook document (content may be empty)

    Returns:
        PlaybookAnalysis with all fields populated or empty
    """
    content = doc.content.lower()
    name = doc.name.lower()

    return PlaybookAnalysis(
        estimation=extract_estimation(content, name),
        description=extract_description(doc.content, doc.name),
        requirements=extract_requirements(content),
        tags=extract_tags(content, name),
        complexity=assess_complexity(content),
        hours=extract_hours(content),
        prerequisites=extract_prerequisites(content),
        timing=extract_timing(content),
    )
