"""
Action enumeration submodule.

Provides message parsing, legal action construction, subset-sum search and
response building for ygopro-core interaction.
"""

from .parsers import (
    # Binary readers
    read_u8, read_u16, read_u32, read_i32,
    # Message parsers
    parse_idle,
    parse_battle,
    parse_select_place,
    parse_select_option,
    parse_select_sum,
    parse_announce_card,
    parse_announce_number,
    parse_announce_attrib,
)

from .sum_utils import (
    MAX_SUM_ITEMS,
    combinations,
    sum_to,
    sum_to2,
    combinations_with_weight,
    combinations_with_weight2,
    find_valid_sum_combinations,
)

from .actions import (
    ActionAct,
    ActionPhase,
    LegalAction,
    card_spec,
    effect_index,
    idle_actions,
    battle_actions,
    place_actions,
    sum_actions,
    announce_card_actions,
    announce_number_actions,
    announce_attrib_actions,
    option_actions,
)

from .responses import (
    build_command_response,
    build_select_place_response,
    build_select_sum_response,
    encode_response,
)

__all__ = [
    # Parsers
    'read_u8', 'read_u16', 'read_u32', 'read_i32',
    'parse_idle', 'parse_battle', 'parse_select_place', 'parse_select_option',
    'parse_select_sum', 'parse_announce_card', 'parse_announce_number',
    'parse_announce_attrib',
    # Subset-sum search
    'MAX_SUM_ITEMS', 'combinations', 'sum_to', 'sum_to2',
    'combinations_with_weight', 'combinations_with_weight2',
    'find_valid_sum_combinations',
    # Actions
    'ActionAct', 'ActionPhase', 'LegalAction', 'card_spec', 'effect_index',
    'idle_actions', 'battle_actions', 'place_actions', 'sum_actions',
    'announce_card_actions', 'announce_number_actions',
    'announce_attrib_actions', 'option_actions',
    # Responses
    'build_command_response', 'build_select_place_response',
    'build_select_sum_response', 'encode_response',
]
