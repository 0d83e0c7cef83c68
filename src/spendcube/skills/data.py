"""Static UNSPSC taxonomy slices and few-shot examples per skill."""

from __future__ import annotations

from .registry import ClassificationExample, TaxonomyEntry

_IT_SEGMENT = "Information Technology Broadcasting and Telecommunications"
_OFFICE_SEGMENT = "Office Equipment and Accessories and Supplies"
_MGMT_SEGMENT = "Management and Business Professionals and Administrative Services"
_ENG_SEGMENT = "Engineering and Research and Technology Based Services"
_FURNITURE_SEGMENT = "Furniture and Furnishings"
_TRANSPORT_SEGMENT = "Transportation and Storage and Mail Services"
_LODGING_SEGMENT = "Travel and Food and Lodging and Entertainment Services"


def _entries(segment: str, family: str, rows: list[tuple[str, str]]) -> list[TaxonomyEntry]:
    return [TaxonomyEntry(code=code, title=title, segment=segment, family=family) for code, title in rows]


IT_HARDWARE_TAXONOMY: tuple[TaxonomyEntry, ...] = tuple(
    _entries(
        _IT_SEGMENT,
        "Computer Equipment and Accessories",
        [
            ("43211500", "Computers"),
            ("43211501", "Desktop computers"),
            ("43211502", "Notebook computers"),
            ("43211503", "Personal digital assistants PDAs or organizers"),
            ("43211507", "Tablet computers"),
            ("43211508", "Thin client computers"),
            ("43211509", "High end computer servers"),
            ("43211600", "Computer displays"),
            ("43211700", "Computer data input devices"),
            ("43211701", "Computer keyboards"),
            ("43211702", "Computer mouse or trackballs"),
            ("43212100", "Computer printers"),
        ],
    )
    + _entries(
        _IT_SEGMENT,
        "Data Voice or Multimedia Network Equipment",
        [
            ("43222600", "Network switches"),
            ("43222609", "Network routers"),
        ],
    )
)

IT_HARDWARE_EXAMPLES = (
    ClassificationExample(
        vendor="Dell Technologies",
        description="Latitude 5520 Laptop Computer",
        code="43211502",
        title="Notebook computers",
        reasoning="Dell Latitude is a business laptop product line, clearly a notebook computer",
    ),
    ClassificationExample(
        vendor="Cisco Systems",
        description="Catalyst 9200 Network Switch 24-port",
        code="43222600",
        title="Network switches",
        reasoning="Cisco Catalyst is a network switch product line",
    ),
)

OFFICE_SUPPLIES_TAXONOMY: tuple[TaxonomyEntry, ...] = tuple(
    _entries(
        _OFFICE_SEGMENT,
        "Office supplies",
        [
            ("44111500", "Pens and pencils"),
            ("44111501", "Pencils"),
            ("44111503", "Pens"),
            ("44111505", "Markers"),
            ("44111800", "Correction supplies"),
            ("44111900", "Desk supplies"),
            ("44111912", "Staplers"),
            ("44112000", "Paper products"),
            ("44121500", "Adhesives and tapes"),
            ("44121600", "Binding and lamination supplies"),
            ("44121700", "Filing supplies"),
            ("44121701", "File folders"),
            ("44121702", "Binders"),
        ],
    )
)

OFFICE_SUPPLIES_EXAMPLES = (
    ClassificationExample(
        vendor="Staples",
        description="Copy Paper, 8.5x11, 10-ream case",
        code="44112000",
        title="Paper products",
        reasoning="Standard copy paper is classified under paper products",
    ),
    ClassificationExample(
        vendor="Amazon Business",
        description="3-Ring Binders, 1 inch, 12-pack",
        code="44121702",
        title="Binders",
        reasoning="Ring binders are classified under filing supplies - binders",
    ),
)

PROFESSIONAL_SERVICES_TAXONOMY: tuple[TaxonomyEntry, ...] = tuple(
    _entries(
        _MGMT_SEGMENT,
        "Management advisory services",
        [
            ("80101500", "Business and corporate management consulting services"),
            ("80101501", "Strategic planning consultation services"),
            ("80101502", "Corporate mergers and acquisition services"),
            ("80101504", "Business process reengineering services"),
        ],
    )
    + _entries(
        _MGMT_SEGMENT,
        "Human resources services",
        [
            ("80111500", "Human resources services"),
            ("80111501", "Personnel recruitment"),
            ("80111502", "Executive search services"),
        ],
    )
    + _entries(
        _MGMT_SEGMENT,
        "Legal services",
        [
            ("80121500", "Legal services"),
            ("80121501", "Criminal law services"),
            ("80121502", "Bankruptcy law services"),
            ("80121600", "Legal review services"),
        ],
    )
    + _entries(
        _ENG_SEGMENT,
        "Computer services",
        [
            ("81111500", "Computer hardware maintenance and support"),
            ("81111800", "System and network administration services"),
            ("81112000", "Data services"),
            ("81112200", "Software or hardware engineering"),
        ],
    )
)

PROFESSIONAL_SERVICES_EXAMPLES = (
    ClassificationExample(
        vendor="McKinsey & Company",
        description="Strategic Planning Consultation Q4",
        code="80101501",
        title="Strategic planning consultation services",
        reasoning="McKinsey provides management consulting, specifically strategic planning",
    ),
    ClassificationExample(
        vendor="Robert Half",
        description="IT Staff Augmentation Services",
        code="80111501",
        title="Personnel recruitment",
        reasoning="Staffing services fall under personnel recruitment",
    ),
)

FURNITURE_TAXONOMY: tuple[TaxonomyEntry, ...] = tuple(
    _entries(
        _FURNITURE_SEGMENT,
        "Accommodation furniture",
        [
            ("56101500", "Office furniture"),
            ("56101501", "Bookcases"),
            ("56101503", "Desks"),
            ("56101504", "Credenzas"),
            ("56101505", "Storage cabinets or lockers"),
            ("56101510", "Workstations"),
            ("56101519", "Conference tables"),
            ("56101800", "Seating"),
            ("56101801", "Chairs"),
            ("56101802", "Sofas"),
        ],
    )
)

FURNITURE_EXAMPLES = (
    ClassificationExample(
        vendor="Herman Miller",
        description="Aeron Chair, Size B, Graphite",
        code="56101801",
        title="Chairs",
        reasoning="Aeron is an office chair, classified under seating/chairs",
    ),
    ClassificationExample(
        vendor="Steelcase",
        description="Height Adjustable Standing Desk 60x30",
        code="56101503",
        title="Desks",
        reasoning="Standing desk is classified under desks",
    ),
)

TRAVEL_TAXONOMY: tuple[TaxonomyEntry, ...] = tuple(
    _entries(
        _TRANSPORT_SEGMENT,
        "Passenger transport",
        [
            ("78111500", "Air transportation"),
            ("78111501", "Scheduled domestic passenger airline flights"),
            ("78111502", "Scheduled international passenger airline flights"),
            ("78111800", "Passenger ground transportation"),
            ("78111801", "Taxi services"),
            ("78111803", "Car rental services"),
        ],
    )
    + _entries(
        _LODGING_SEGMENT,
        "Hotels and lodging and meeting facilities",
        [
            ("90111500", "Hotels and motels"),
            ("90111502", "Hotel or motel"),
        ],
    )
)

TRAVEL_EXAMPLES = (
    ClassificationExample(
        vendor="United Airlines",
        description="SFO-JFK Round Trip Business Class",
        code="78111501",
        title="Scheduled domestic passenger airline flights",
        reasoning="Commercial airline flight between two US airports",
    ),
    ClassificationExample(
        vendor="Marriott",
        description="Hotel Stay - Chicago, IL, 3 nights",
        code="90111502",
        title="Hotel or motel",
        reasoning="Hotel accommodation",
    ),
)

# skill id -> (taxonomy, examples)
SKILL_DATA: dict[str, tuple[tuple[TaxonomyEntry, ...], tuple[ClassificationExample, ...]]] = {
    "it_hardware": (IT_HARDWARE_TAXONOMY, IT_HARDWARE_EXAMPLES),
    "it_software": (
        tuple(t for t in PROFESSIONAL_SERVICES_TAXONOMY if t.code.startswith("81")),
        (),
    ),
    "office_supplies": (OFFICE_SUPPLIES_TAXONOMY, OFFICE_SUPPLIES_EXAMPLES),
    "furniture": (FURNITURE_TAXONOMY, FURNITURE_EXAMPLES),
    "professional_services": (PROFESSIONAL_SERVICES_TAXONOMY, PROFESSIONAL_SERVICES_EXAMPLES),
    "travel": (TRAVEL_TAXONOMY, TRAVEL_EXAMPLES),
    "hr_services": (
        tuple(t for t in PROFESSIONAL_SERVICES_TAXONOMY if t.code.startswith("8011")),
        (),
    ),
    "telecommunications": (
        tuple(t for t in IT_HARDWARE_TAXONOMY if t.code.startswith("4322")),
        (),
    ),
    "facilities": ((), ()),
    "raw_materials": ((), ()),
}
