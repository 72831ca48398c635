"""Argument validation for the command-line tools."""

from typing import List, Optional

from ..config import SEARCH_MODES

# Cubies beyond the 24 playable slots can never be placed
MAX_CUBIES = 24


def validate_game_config(p1_cubies: int, p2_cubies: int) -> List[str]:
    """Validate starting cubie counts.

    Args:
        p1_cubies: Cubies for the first player
        p2_cubies: Cubies for the second player

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    for name, count in (("player 1", p1_cubies), ("player 2", p2_cubies)):
        if count < 0:
            errors.append(
                f"❌ Invalid cubie count for {name}: {count}\n"
                f"   Must be non-negative"
            )

    if p1_cubies + p2_cubies > MAX_CUBIES:
        errors.append(
            f"❌ Too many cubies: {p1_cubies} + {p2_cubies}\n"
            f"   The cage has only {MAX_CUBIES} playable slots"
        )

    return errors


def validate_solver_config(mode: str, stack_size_mb: Optional[int] = None) -> List[str]:
    """Validate solver settings.

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if mode not in SEARCH_MODES:
        errors.append(
            f"❌ Invalid search mode: {mode}\n"
            f"   Must be one of: {', '.join(SEARCH_MODES)}"
        )

    if stack_size_mb is not None and (stack_size_mb < 1 or stack_size_mb > 4096):
        errors.append(
            f"❌ Invalid stack size: {stack_size_mb} MB\n"
            f"   Must be between 1 and 4096\n"
            f"   Recommended: 256"
        )

    return errors


def validate_filter_config(min_distance: int) -> List[str]:
    errors = []

    if min_distance < 0:
        errors.append(
            f"❌ Invalid minimum distance: {min_distance}\n"
            f"   Must be non-negative\n"
            f"   Recommended: 3 (cheaper positions are solved on demand)"
        )

    return errors


def print_validation_errors(errors: List[str], logger) -> None:
    """Log validation errors.

    Args:
        errors: List of error messages
        logger: Logger instance
    """
    if errors:
        logger.error("Configuration validation failed:")
        logger.error("")
        for error in errors:
            logger.error(error)
        logger.error("")
        logger.error("Please fix the arguments and try again.")
