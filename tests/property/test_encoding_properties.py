"""
Property-based tests for the spec codec, placement masks and id registries.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ygo_bridge.encoding.placement import decode_placements, placement_from_location, placement_to_location
from ygo_bridge.encoding.spec import decode_spec, decode_spec_for_player, encode_spec
from ygo_bridge.engine.bindings import (
    LOCATION_DECK, LOCATION_EXTRA, LOCATION_GRAVE, LOCATION_HAND,
    LOCATION_MZONE, LOCATION_OVERLAY, LOCATION_REMOVED, LOCATION_SZONE,
)
from ygo_bridge.errors import LookupMiss
from ygo_bridge.registry import make_ids

pytest.importorskip("hypothesis")

ZONES = [LOCATION_DECK, LOCATION_HAND, LOCATION_MZONE, LOCATION_SZONE,
         LOCATION_GRAVE, LOCATION_REMOVED, LOCATION_EXTRA]

locations = st.one_of(
    st.sampled_from(ZONES),
    st.sampled_from([LOCATION_MZONE | LOCATION_OVERLAY]),
)
masks = st.integers(min_value=0, max_value=0xFFFFFFFF)


class TestSpecRoundTrip:

    @given(location=locations, sequence=st.integers(0, 59), sub_index=st.integers(0, 25))
    @settings(max_examples=200)
    def test_decode_inverts_encode(self, location, sequence, sub_index):
        if not location & LOCATION_OVERLAY:
            sub_index = 0
        spec = encode_spec(location, sequence, sub_index)
        assert decode_spec(spec) == (location, sequence, sub_index)
        assert encode_spec(*decode_spec(spec)) == spec

    @given(location=locations, sequence=st.integers(0, 59), sub_index=st.integers(0, 25),
           player=st.sampled_from([0, 1]), controller=st.sampled_from([0, 1]))
    @settings(max_examples=200)
    def test_controller_round_trip(self, location, sequence, sub_index, player, controller):
        if not location & LOCATION_OVERLAY:
            sub_index = 0
        spec = encode_spec(location, sequence, sub_index, opponent=controller != player)
        assert decode_spec_for_player(player, spec) == (controller, location, sequence, sub_index)


class TestPlacementMasks:

    @given(mask=masks)
    @settings(max_examples=200)
    def test_invert_of_complement(self, mask):
        assert decode_placements(mask) == decode_placements(~mask & 0xFFFFFFFF, invert=True)

    @given(mask=masks)
    @settings(max_examples=200)
    def test_partition(self, mask):
        """Free and blocked placements together cover all 30 slots once."""
        free = decode_placements(mask)
        blocked = decode_placements(mask, invert=True)
        assert len(free) + len(blocked) == 30
        assert not set(free) & set(blocked)

    @given(mask=masks)
    @settings(max_examples=100)
    def test_location_round_trip(self, mask):
        for placement in decode_placements(mask):
            assert placement_from_location(*placement_to_location(placement)) == placement


class TestRegistryBijection:

    @given(keys=st.lists(st.integers(), unique=True, max_size=30),
           offset=st.integers(-5, 100), skip=st.integers(0, 35))
    @settings(max_examples=200)
    def test_bijection_onto_range(self, keys, offset, skip):
        ids = make_ids(keys, id_offset=offset, skip=skip)
        kept = max(0, len(keys) - skip)
        assert sorted(ids.values()) == list(range(offset, offset + kept))
        assert list(ids) == keys[skip:]

    @given(domain=st.dictionaries(st.integers(0, 1 << 20), st.text(max_size=3), max_size=20),
           offset=st.integers(0, 20))
    @settings(max_examples=100)
    def test_mapping_ordered_by_key(self, domain, offset):
        ids = make_ids(domain, id_offset=offset)
        assert [ids[k] for k in sorted(domain)] == list(range(offset, offset + len(domain)))

    @given(keys=st.lists(st.integers(0, 100), unique=True, max_size=20),
           missing=st.integers(101, 200))
    def test_miss_outside_domain(self, keys, missing):
        with pytest.raises(LookupMiss):
            make_ids(keys).lookup(missing)
