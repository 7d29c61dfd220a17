"""Option registry and parser.

``ArgumentManager`` owns the declared options, parses an argv-shaped token
list against them and exposes the parsed values as typed scalars or lists.

Problems found while declaring or parsing never raise: each one is appended
to the manager's diagnostics and processing carries on, so a single run
reports every mistake in the command line. ``parse`` returns the number of
diagnostics; a non-zero count means the invocation is invalid.

Example:
    manager = ArgumentManager("demo", "Demo tool")
    manager.add("-o", "--output", help="output file")
    manager.add("--count", optional=True).help("how many")
    if manager.parse(sys.argv) > 0:
        print(manager.error_messages())
    count = manager.value("--count", kind=int)
"""

from typing import Optional, Sequence, TypeVar

from argslot.config import RegistryConfig
from argslot.core.parsers.conversion import convert_value, default_for
from argslot.core.parsers.names import binary_name_from_path, is_valid_name
from argslot.core.usage import UsageSections, build_usage_sections, render_usage
from argslot.domain.types.option import Option, OptionSlot
from argslot.logger import get_logger

logger = get_logger("registry")

__all__ = ["ArgumentManager"]

T = TypeVar("T")

INVALID_NAME_HINT = "options must start with - or -- followed by a letter"


class ArgumentManager:
    """Declares command-line options, parses argv and serves typed values.

    Every instance starts with the built-in ``-h``/``--help`` option. The
    manager is not thread safe; callers serialize access.
    """

    def __init__(
        self,
        program_name: str = "",
        description: str = "",
        config: Optional[RegistryConfig] = None,
    ):
        self.config = config or RegistryConfig()
        self.program_name = program_name or self.config.program_name
        self.description = description or self.config.description
        self.binary_name = ""

        self._indices: dict[str, int] = {}
        self._slots: list[OptionSlot] = []
        self._errors: list[str] = []
        self._matched: set[int] = set()

        self.add(
            self.config.help_name,
            self.config.help_alt_name or None,
            0,
            optional=True,
            help=self.config.help_text,
        )

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    def add(
        self,
        name: str,
        alt_name: str | int | Sequence[str] | None = None,
        arity: int | Sequence[str] | None = None,
        optional: bool = False,
        help: str = "",
    ) -> Optional[Option]:
        """
        Declare an option.

        The second and third arguments are interpreted by type, so every
        declaration form reads naturally:

            add("-x")                          # one value, default "0"
            add("--size", 2)                   # two values
            add("--size", 2, True, "w h")      # two values, optional, with help
            add("--mode", ["fast"])            # one value, default "fast"
            add("-o", "--output")              # two spellings
            add("-o", "--output", 3)           # two spellings, three values
            add("-o", "--output", ["a", "b"])  # two spellings, given defaults

        An arity of 0 is treated as 1. When the second argument is an arity
        or a default list, the third and fourth are ``optional`` and ``help``.

        Args:
            name: Primary spelling
            alt_name: Secondary spelling, or the arity / default values of a single-name option
            arity: Number of values, or the default values (their count is the arity)
            optional: Whether usage lists the option as optional
            help: Help text shown in usage

        Returns:
            The declared Option for fluent configuration, or None when the
            declaration was rejected (the reason is recorded in the diagnostics)

        Raises:
            TypeError: If the arguments do not form one of the forms above
        """
        if alt_name is None or isinstance(alt_name, str):
            spec = 1 if arity is None else arity
        else:
            if isinstance(arity, bool):
                # add(name, arity_or_defaults, optional, help): positionals shift left by one
                shifted_help = optional if isinstance(optional, str) else help
                optional, help = arity, shifted_help
            elif arity is not None:
                raise TypeError(
                    "the third argument must be 'optional' (a bool) when the second argument is an arity or default values"
                )
            spec = alt_name
            alt_name = None

        defaults = self._default_values(spec)

        if alt_name is None:
            return self._add_single(name, defaults, optional, help)
        return self._add_pair(name, alt_name, defaults, optional, help)

    def _default_values(self, spec: int | Sequence[str]) -> list[str]:
        if isinstance(spec, bool):
            raise TypeError("arity must be an int or a sequence of default values, not bool")
        if isinstance(spec, int):
            return [self.config.placeholder] * max(spec, 1)
        if isinstance(spec, str):
            raise TypeError("default values must be a sequence of strings, not a single string")
        values = [str(v) for v in spec]
        if not values:
            raise TypeError("default values must contain at least one value")
        return values

    def _add_single(self, name: str, defaults: list[str], optional: bool, help: str) -> Optional[Option]:
        if not is_valid_name(name):
            self._record(f"{name} is not a valid option name, {INVALID_NAME_HINT}")
            return None

        if name in self._indices:
            self._record(f"{name} option already exists.")
            return None

        option = Option(name=name, arity=len(defaults), is_optional=optional, help_text=help)
        return self._register(option, defaults)

    def _add_pair(
        self, name: str, alt_name: str, defaults: list[str], optional: bool, help: str
    ) -> Optional[Option]:
        if not is_valid_name(name) or not is_valid_name(alt_name):
            self._record(f"{name} is not a valid option name, {INVALID_NAME_HINT}.")
            return None

        if name in self._indices or alt_name in self._indices:
            self._record(f"{name} & {alt_name} option already exists.")
            return None

        option = Option(
            name=name,
            alt_name=alt_name,
            arity=len(defaults),
            is_optional=optional,
            help_text=help,
        )
        return self._register(option, defaults)

    def _register(self, option: Option, defaults: list[str]) -> Option:
        index = len(self._slots)
        for spelling in option.names:
            self._indices[spelling] = index
        self._slots.append(OptionSlot(option=option, values=list(defaults)))
        logger.debug(f"Declared option {', '.join(option.names)} with {option.arity} value(s)")
        return option

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, tokens: Sequence[str]) -> int:
        """
        Parse an argv-shaped token list into the declared option slots.

        Token 0 is the invoked program path and only yields ``binary_name``.
        Each following option name consumes exactly ``arity`` tokens. A
        missing value (end of input, or a token shaped like an option name)
        is reported and its slot position keeps its previous value; the
        cursor still moves past the full arity.

        Args:
            tokens: The raw argument list, e.g. sys.argv

        Returns:
            Total number of diagnostics recorded so far (declaration and parse)
        """
        tokens = list(tokens)
        self._matched = set()
        if not tokens:
            logger.debug("Empty token list, nothing to parse")
            return len(self._errors)

        self.binary_name = binary_name_from_path(tokens[0])

        i = 1
        while i < len(tokens):
            token = tokens[i]

            if not is_valid_name(token):
                self._record(f"{token} is not a valid option")
                i += 1
                continue

            index = self._indices.get(token)
            if index is None:
                self._record(f"{token} is not a known option")
                i += 1
                continue

            self._matched.add(index)
            slot = self._slots[index]
            arity = len(slot.values)
            for j in range(arity):
                current = i + j + 1
                if current >= len(tokens) or is_valid_name(tokens[current]):
                    self._record(f"{token} has less values than expected")
                else:
                    slot.values[j] = tokens[current]

            logger.debug(f"Parsed {token} = {slot.values}")
            i += arity + 1

        logger.debug(f"Parsed {len(tokens) - 1} token(s) for {self.binary_name}, {len(self._errors)} error(s)")
        return len(self._errors)

    # ------------------------------------------------------------------
    # Typed retrieval
    # ------------------------------------------------------------------

    def value(self, name: str, index: int = 0, kind: type[T] = str) -> T:  # type: ignore[assignment]
        """
        Return one value of an option converted to ``kind``.

        Args:
            name: Any spelling of the option
            index: Position within the option's values
            kind: str, int, float or Decimal

        Returns:
            The converted value, or the kind's zero value ('' / 0) when the
            name is unknown or the index is out of range

        Raises:
            ValueError: If the stored text does not convert to ``kind``
            TypeError: If ``kind`` is not supported
        """
        slot = self._slot(name)
        if slot is None or not 0 <= index < len(slot.values):
            return default_for(kind)
        return convert_value(slot.values[index], kind)

    def values(self, name: str, kind: type[T] = str) -> list[T]:  # type: ignore[assignment]
        """Return every value of an option converted to ``kind`` ([] for unknown names)."""
        slot = self._slot(name)
        if slot is None:
            return []
        return [convert_value(raw, kind) for raw in slot.values]

    def _slot(self, name: str) -> Optional[OptionSlot]:
        index = self._indices.get(name)
        return None if index is None else self._slots[index]

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._indices

    def names(self) -> list[str]:
        """Every declared spelling, in declaration order."""
        return [spelling for slot in self._slots for spelling in slot.option.names]

    def options(self) -> list[Option]:
        """Declared options in declaration order."""
        return [slot.option for slot in self._slots]

    def was_given(self, name: str) -> bool:
        """Whether the option appeared on the last parsed command line."""
        index = self._indices.get(name)
        return index is not None and index in self._matched

    def help_requested(self) -> bool:
        """Whether the built-in help option appeared on the last parsed command line."""
        return self.was_given(self.config.help_name)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    @property
    def errors(self) -> list[str]:
        """A copy of the accumulated diagnostics."""
        return list(self._errors)

    def error_messages(self) -> str:
        """Numbered diagnostics, one per line: ' 1.  <message>'."""
        return "".join(f" {number}.  {message}\n" for number, message in enumerate(self._errors, start=1))

    def usage_sections(self) -> UsageSections:
        """Usage data grouped into required and optional options."""
        return build_usage_sections(
            self.options(),
            program_name=self.program_name,
            description=self.description,
            binary_name=self.binary_name,
        )

    def usage(self) -> str:
        """Plain-text usage for display by the host."""
        return render_usage(self.usage_sections())

    def _record(self, message: str) -> None:
        self._errors.append(message)
        logger.warning(message)
