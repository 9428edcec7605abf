"""
Error and warning classes for FinPlanLab.

The projection engine degrades gracefully on partial instrument data, so most
problems surface as warnings. Only structurally invalid top-level input raises.
"""


class ConfigError(Exception):
    """
    Configuration error during projection setup.

    Raised when the top-level input cannot be projected at all, or when an
    instrument's kind has no registered strategy.

    **Common Causes:**
    - Missing or unparseable profile birth year
    - Profile given as something other than a mapping or Profile
    - Instrument kind (pension type, debt type) not found in any registry

    **Example Usage:**
        ```python
        from finplanlab.core.errors import ConfigError
        from finplanlab.core.instruments import Profile

        try:
            Profile.from_record({"retirementAge": 60})
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```

    **When to Use:**
    - When building a Profile from a raw record
    - When resolving a strategy for an instrument kind
    """

    pass


class FinPlanWarning(UserWarning):
    """Warning for degraded instrument data (unparseable fields, unknown kinds)."""
