"""
SolveOptions class passed to solver back-ends
"""

VERBOSITY_LEVELS = ('off', 'low', 'medium', 'high')


class SolveOptions:
    """
    Options handed to a :class:`~mipmodel.solver.Solver`.

    The modeling layer does not interpret these values; each back-end maps
    them onto its own settings.

    Attributes
    ----------
    duration : float
        Maximum solve time in seconds (default: 30.0)
    verbosity : str
        One of 'off', 'low', 'medium', 'high' (default: 'off')
    mip_gap_absolute : float
        Absolute gap at which the search stops (default: 1e-6)
    mip_gap_relative : float
        Relative gap at which the search stops (default: 1e-4)
    threads : int
        Number of threads, 0 lets the back-end decide (default: 0)

    Examples
    --------
    >>> options = SolveOptions()
    >>> options.duration = 10.0
    >>> options.verbosity = 'low'
    """

    def __init__(self):
        self.duration = 30.0
        self.verbosity = 'off'
        self.mip_gap_absolute = 1e-6
        self.mip_gap_relative = 1e-4
        self.threads = 0

    def __repr__(self):
        return (f"SolveOptions(duration={self.duration}, "
                f"verbosity={self.verbosity!r}, "
                f"mip_gap_absolute={self.mip_gap_absolute}, "
                f"mip_gap_relative={self.mip_gap_relative}, "
                f"threads={self.threads})")

    def validate(self):
        """
        Check the option values.

        Raises
        ------
        ValueError
            If a value is out of range
        """
        if self.duration < 0:
            raise ValueError(f"duration must be non-negative, got {self.duration}")
        if self.verbosity not in VERBOSITY_LEVELS:
            raise ValueError(f"verbosity must be one of {VERBOSITY_LEVELS}, "
                             f"got {self.verbosity!r}")
        if self.mip_gap_absolute < 0 or self.mip_gap_relative < 0:
            raise ValueError("MIP gaps must be non-negative")
        if self.threads < 0:
            raise ValueError(f"threads must be non-negative, got {self.threads}")

    @classmethod
    def from_dict(cls, d):
        """Create SolveOptions from dictionary, ignoring unknown keys"""
        options = cls()
        known = options.to_dict()
        for key, value in d.items():
            if key in known:
                setattr(options, key, value)
        return options

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'duration': self.duration,
            'verbosity': self.verbosity,
            'mip_gap_absolute': self.mip_gap_absolute,
            'mip_gap_relative': self.mip_gap_relative,
            'threads': self.threads,
        }
