from enum import Enum


class StageCategory(str, Enum):
    JUDGMENT = "Judgment"
    ARGUMENTS = "Arguments"
    HEARING = "Hearing"
    EVIDENCE = "Evidence"
    EVIDENCE_PH = "EvidencePH"  # Part-heard evidence
    ISSUES = "Issues"
    OTHER = "Other"


class CaseType(str, Enum):
    CIVIL = "civil"
    CRIMINAL = "criminal"


class SelectionMode(str, Enum):
    ALL = "all"
    RANGE = "range"


class Language(str, Enum):
    ENGLISH = "english"
    MARATHI = "marathi"


class ReportStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"


class ExportFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    CSV = "csv"


# Column labels per language, in column order.
STAGE_LABELS: dict[Language, dict[StageCategory, str]] = {
    Language.ENGLISH: {
        StageCategory.JUDGMENT: "Judgment",
        StageCategory.ARGUMENTS: "Arguments",
        StageCategory.HEARING: "Hearing",
        StageCategory.EVIDENCE: "Evidence",
        StageCategory.EVIDENCE_PH: "Evidence (P.H.)",
        StageCategory.ISSUES: "Issues",
        StageCategory.OTHER: "Other",
    },
    Language.MARATHI: {
        StageCategory.JUDGMENT: "निकाल",
        StageCategory.ARGUMENTS: "युक्तिवाद",
        StageCategory.HEARING: "सुनावणी",
        StageCategory.EVIDENCE: "पुरावा",
        StageCategory.EVIDENCE_PH: "पुरावा (अंशतः)",
        StageCategory.ISSUES: "मुद्दे",
        StageCategory.OTHER: "इतर",
    },
}
