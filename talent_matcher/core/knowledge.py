"""
Static knowledge tables used for heuristic matching.

The tables (skill synonyms, skill categories, regions and keyword maps) are
read-only once a KnowledgeBase is built and can be shared freely across
threads. DEFAULT_TABLES is the compiled-in set; KnowledgeBase.from_dict
overlays a tuned set loaded from a data file.
"""

from dataclasses import dataclass, field
from typing import Optional
import copy

from .exceptions import ConfigurationError
from .models import EducationLevel, WorkModel
from .text import contains_keyword, normalize_keyword, normalize_location, normalize_skill


DEFAULT_TABLES = {
    "synonyms": [
        ["javascript", "js"],
        ["javascript", "ecmascript"],
        ["javascript", "es6"],
        ["typescript", "ts"],
        ["react", "reactjs"],
        ["react", "react.js"],
        ["vue", "vuejs"],
        ["vue", "vue.js"],
        ["node", "nodejs"],
        ["node", "node.js"],
        ["angular", "angularjs"],
        ["angular", "ng"],
        ["css", "stylesheet"],
        ["html", "markup"],
        ["java", "jvm"],
        ["python", "py"],
        ["c#", "csharp"],
        ["c#", "c sharp"],
        ["c++", "cpp"],
        [".net", "dotnet"],
        ["postgresql", "postgres"],
        ["microsoft sql server", "mssql"],
        ["git", "version control"],
        ["docker", "container"],
        ["docker", "containerization"],
        ["kubernetes", "k8s"],
        ["kubernetes", "container orchestration"],
        ["aws", "amazon web services"],
        ["azure", "microsoft azure"],
        ["gcp", "google cloud"],
        ["gcp", "google cloud platform"],
        ["ui", "user interface"],
        ["ux", "user experience"],
        ["devops", "development operations"],
        ["machine learning", "ml"],
        ["artificial intelligence", "ai"],
    ],
    "categories": {
        "Frontend": [
            "react", "vue", "angular", "javascript", "typescript", "html", "css",
            "sass", "less", "jquery", "bootstrap",
        ],
        "Backend": [
            "node", "express", "django", "flask", "spring", "java", "python",
            "ruby", "php", "go", "rust", "c#", ".net",
        ],
        "Databases": [
            "sql", "mysql", "postgresql", "mongodb", "firebase", "oracle",
            "cassandra", "redis", "dynamodb",
        ],
        "DevOps": [
            "docker", "kubernetes", "aws", "azure", "gcp", "terraform", "jenkins",
            "gitlab", "github", "ci/cd",
        ],
        "Mobile": [
            "android", "ios", "swift", "kotlin", "react native", "flutter", "xamarin",
        ],
        "Design": [
            "ui", "ux", "figma", "sketch", "adobe", "photoshop", "illustrator", "indesign",
        ],
        "Project Management": [
            "scrum", "agile", "kanban", "jira", "confluence", "trello", "asana", "pmp",
        ],
        "Soft Skills": [
            "kommunikation", "teamarbeit", "führung", "problemlösung",
            "zeitmanagement", "kreativität", "communication", "teamwork",
            "leadership", "problem solving", "time management", "creativity",
        ],
    },
    "regions": {
        "Berlin/Brandenburg": [
            "berlin", "potsdam", "brandenburg", "cottbus", "frankfurt (oder)", "oranienburg",
        ],
        "Hamburg/Schleswig-Holstein": [
            "hamburg", "kiel", "lübeck", "flensburg", "neumünster", "norderstedt", "pinneberg",
        ],
        "Niedersachsen/Bremen": [
            "hannover", "bremen", "oldenburg", "osnabrück", "wolfsburg", "braunschweig", "göttingen",
        ],
        "Nordrhein-Westfalen": [
            "köln", "düsseldorf", "dortmund", "essen", "duisburg", "bochum", "wuppertal",
            "bonn", "münster", "aachen",
        ],
        "Rheinland-Pfalz/Saarland": [
            "mainz", "trier", "koblenz", "kaiserslautern", "ludwigshafen", "saarbrücken",
        ],
        "Hessen": [
            "frankfurt", "wiesbaden", "kassel", "darmstadt", "offenbach", "gießen", "fulda",
        ],
        "Baden-Württemberg": [
            "stuttgart", "karlsruhe", "mannheim", "freiburg", "heidelberg", "ulm",
            "heilbronn", "pforzheim",
        ],
        "Bayern": [
            "münchen", "nürnberg", "augsburg", "regensburg", "würzburg", "ingolstadt",
            "erlangen", "fürth",
        ],
        "Sachsen": ["dresden", "leipzig", "chemnitz", "zwickau", "plauen", "görlitz"],
        "Thüringen": ["erfurt", "jena", "gera", "weimar", "eisenach", "gotha", "suhl"],
        "Sachsen-Anhalt": ["magdeburg", "halle", "dessau", "wittenberg", "stendal", "halberstadt"],
        "Mecklenburg-Vorpommern": [
            "rostock", "schwerin", "neubrandenburg", "stralsund", "greifswald", "wismar",
        ],
    },
    "remote_keywords": [
        "remote", "homeoffice", "home office", "home-office", "remote work", "remote-work",
        "remote-arbeit", "telearbeit", "fernarbeit", "mobiles arbeiten",
        "standortunabhängig", "ortsunabhängig", "von zuhause", "heimarbeit",
        "work from home",
    ],
    "hybrid_keywords": [
        "hybrid", "hybrid-modell", "teilweise vor ort", "teilweise remote",
    ],
    # Checked from the highest level down
    "education_keywords": {
        "professor": ["professor", "prof.", "lehrstuhl", "chair"],
        "doctorate": ["doktor", "doctor", "doctorate", "phd", "ph.d", "dr.", "promotion"],
        "master": [
            "master", "magister", "m.sc", "m.a", "msc", "mba", "diplom", "postgraduate",
            "graduate degree",
        ],
        "bachelor": ["bachelor", "bakkalaureus", "undergraduate", "b.sc", "b.a", "bsc", "b.eng"],
        "vocational": ["ausbildung", "berufsausbildung", "apprenticeship", "vocational", "lehre"],
    },
    # Checked in this order, first hit wins
    "work_model_keywords": {
        "full_time": ["vollzeit", "full-time", "fulltime", "full time", "full_time"],
        "part_time": ["teilzeit", "part-time", "parttime", "part time", "part_time"],
        "project": [
            "projekt", "project", "befristet", "temporary", "freiberuflich", "freelance",
            "contract",
        ],
        "internship": ["praktikum", "internship", "werkstudent", "student", "intern"],
        "apprenticeship": ["ausbildung", "apprenticeship", "trainee", "duales studium", "duales-studium"],
        "flexible": ["flexibel", "flexible", "remote", "homeoffice", "home-office", "home office"],
    },
}


@dataclass(frozen=True)
class SkillCategory:
    """A named group of related skill tokens."""
    name: str
    skills: frozenset


@dataclass(frozen=True)
class Region:
    """A broad geographic area and the cities in it."""
    name: str
    cities: tuple

    def cities_in(self, location: str) -> list:
        return [city for city in self.cities if contains_keyword(location, city)]


@dataclass(frozen=True)
class KnowledgeBase:
    """Immutable bundle of the lookup tables used by the scorers."""
    synonyms: frozenset = frozenset()
    categories: tuple = ()
    regions: tuple = ()
    remote_keywords: tuple = ()
    hybrid_keywords: tuple = ()
    education_keywords: tuple = ()
    work_model_keywords: tuple = ()
    _category_index: dict = field(default=None, init=False, repr=False, compare=False, hash=False)

    def __post_init__(self):
        index = {}
        for category in self.categories:
            for skill in category.skills:
                index.setdefault(skill, set()).add(category.name)
        object.__setattr__(self, "_category_index", index)

    def are_synonyms(self, first: str, second: str) -> bool:
        return first != second and frozenset((first, second)) in self.synonyms

    def share_category(self, first: str, second: str) -> bool:
        first_categories = self._category_index.get(first)
        if not first_categories:
            return False
        return bool(first_categories & self._category_index.get(second, set()))

    def regions_for(self, location: str) -> set:
        """
        Names of all regions with a city mentioned in the location text.

        A city whose name is part of a longer mentioned city does not count,
        so "frankfurt oder" is not also read as "frankfurt".
        """
        mentioned = [(region.name, city) for region in self.regions for city in region.cities_in(location)]
        return {
            name
            for name, city in mentioned
            if not any(other != city and contains_keyword(other, city) for _, other in mentioned)
        }

    @classmethod
    def from_dict(cls, data: Optional[dict] = None) -> "KnowledgeBase":
        """
        Build a knowledge base from raw tables.

        Each table present in data replaces the corresponding default table;
        missing tables keep their defaults.
        """
        if data is not None and not isinstance(data, dict):
            raise ConfigurationError("Knowledge tables must be a JSON object")

        tables = copy.deepcopy(DEFAULT_TABLES)
        for key, value in (data or {}).items():
            if key not in tables:
                raise ConfigurationError(f"Unknown knowledge table: {key}")
            tables[key] = value

        try:
            synonyms = frozenset(
                frozenset(normalize_skill(token) for token in pair)
                for pair in tables["synonyms"]
                if isinstance(pair, (list, tuple)) and len(pair) == 2
            )
            categories = tuple(
                SkillCategory(name, frozenset(normalize_skill(s) for s in skills))
                for name, skills in tables["categories"].items()
            )
            regions = tuple(
                Region(name, tuple(normalize_location(c) for c in cities))
                for name, cities in tables["regions"].items()
            )
            remote_keywords = tuple(normalize_keyword(k) for k in tables["remote_keywords"])
            hybrid_keywords = tuple(normalize_keyword(k) for k in tables["hybrid_keywords"])
            education_keywords = tuple(
                (EducationLevel[level.upper()], tuple(normalize_keyword(k) for k in keywords))
                for level, keywords in tables["education_keywords"].items()
            )
            work_model_keywords = tuple(
                (WorkModel(model), tuple(normalize_keyword(k) for k in keywords))
                for model, keywords in tables["work_model_keywords"].items()
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Malformed knowledge tables: {e}") from e

        # Highest level first so the strongest keyword wins
        education_keywords = tuple(
            sorted(education_keywords, key=lambda item: item[0].value, reverse=True)
        )

        return cls(
            synonyms=synonyms,
            categories=categories,
            regions=regions,
            remote_keywords=remote_keywords,
            hybrid_keywords=hybrid_keywords,
            education_keywords=education_keywords,
            work_model_keywords=work_model_keywords,
        )

    def to_dict(self) -> dict:
        """Export the tables in the shape accepted by from_dict."""
        return {
            "synonyms": sorted(sorted(pair) for pair in self.synonyms if len(pair) == 2),
            "categories": {c.name: sorted(c.skills) for c in self.categories},
            "regions": {r.name: list(r.cities) for r in self.regions},
            "remote_keywords": list(self.remote_keywords),
            "hybrid_keywords": list(self.hybrid_keywords),
            "education_keywords": {
                level.label: list(keywords) for level, keywords in self.education_keywords
            },
            "work_model_keywords": {
                model.value: list(keywords) for model, keywords in self.work_model_keywords
            },
        }


DEFAULT_KNOWLEDGE = KnowledgeBase.from_dict()
