"""Languages accepted by the judge."""

from enum import Enum

from ..errors import UnknownLanguage


class Language(Enum):
    """A submission language, valued by the name the judge expects."""

    C = "C"
    CSHARP = "C#"
    CPLUSPLUS = "C++"
    COBOL = "Cobol"
    GO = "Go"
    HASKELL = "Haskell"
    JAVA = "Java"
    NODEJS = "Node.js"
    SPIDERMONKEY = "SpiderMonkey"
    KOTLIN = "Kotlin"
    COMMON_LISP = "Common Lisp"
    OBJECTIVE_C = "Objective-C"
    OCAML = "OCaml"
    PASCAL = "Pascal"
    PHP = "PHP"
    PROLOG = "Prolog"
    PYTHON2 = "Python 2"
    PYTHON3 = "Python 3"
    RUBY = "Ruby"
    RUST = "Rust"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Language":
        """Parse a language from its judge name or one of its aliases."""
        language = _ALIASES.get(text.strip().lower())
        if language is None:
            raise UnknownLanguage(text)
        return language


_ALIASES = {language.value.lower(): language for language in Language}
_ALIASES.update(
    {
        "cpp": Language.CPLUSPLUS,
        "cxx": Language.CPLUSPLUS,
        "nodejs": Language.NODEJS,
        "js": Language.NODEJS,
        "node": Language.NODEJS,
        "spider monkey": Language.SPIDERMONKEY,
        "commonlisp": Language.COMMON_LISP,
        "lisp": Language.COMMON_LISP,
        "objectivec": Language.OBJECTIVE_C,
        "python2": Language.PYTHON2,
        "python3": Language.PYTHON3,
    }
)
