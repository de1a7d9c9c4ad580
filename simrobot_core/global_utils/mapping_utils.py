from typing import Tuple, TypeVar

T = TypeVar("T")  # generic type variable


def map_teams_to_own_opponent(my_team_is_first: bool, first_team_item: T, second_team_item: T) -> Tuple[T, T]:
    """
    Map first team and second team items to own and opponent based on my team.

    Args:
        my_team_is_first (bool): True if this robot plays for the first team.
        first_team_item (T): Any item belonging to the first team (int, list, etc.)
        second_team_item (T): Any item belonging to the second team (int, list, etc.)

    Returns:
        Tuple[T, T]: A tuple of (own_item, opponent_item).
    """
    if my_team_is_first:
        own_item = first_team_item
        opponent_item = second_team_item
    else:
        own_item = second_team_item
        opponent_item = first_team_item
    return own_item, opponent_item


def team_relative_number(number: int, robots_per_team: int) -> int:
    """
    Number of a robot as seen by its own team, i.e. second team numbers are shifted down by robots_per_team.
    """
    return number if number <= robots_per_team else number - robots_per_team
