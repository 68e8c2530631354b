# --- config.py ---

from dataclasses import dataclass


@dataclass
class Settings:
    """Runtime settings for the explorer session."""

    # Display elision: at most max_printed children are listed, and listing
    # stops once the shown entries cover more than 100 - min_percentage.
    max_printed: int = 40
    min_percentage: float = 5.0

    prompt: str = "> "
    command_prefix: str = "/"

    # Send removed entries to the trash instead of unlinking them.
    use_trash: bool = False

    def __post_init__(self):
        self.validate()

    def validate(self):
        if self.max_printed < 1:
            raise ValueError("max entries must be >= 1")
        if not 0.0 <= self.min_percentage < 100.0:
            raise ValueError("min percentage must be in [0, 100)")
        if not self.command_prefix:
            raise ValueError("command prefix must not be empty")

    @classmethod
    def from_args(cls, args) -> "Settings":
        """Create from an argparse namespace"""
        return cls(
            max_printed=args.max_entries,
            min_percentage=args.min_percentage,
            use_trash=args.trash,
        )
