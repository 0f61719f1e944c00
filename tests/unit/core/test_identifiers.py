"""Unit tests for identifier and invite-code generation."""

import re
from concurrent.futures import ThreadPoolExecutor

from core.identifiers import (
    INVITE_CODE_ALPHABET,
    INVITE_CODE_LENGTH,
    new_id,
    new_invite_code,
)

ID_PATTERN = re.compile(r"^group_\d{19}_[0-9a-f]{16}$")


class TestNewId:
    def test_has_prefix_time_and_random_parts(self):
        assert ID_PATTERN.match(new_id("group"))

    def test_later_ids_sort_after_earlier_ones(self):
        first = new_id("group")
        second = new_id("group")
        # Equal time parts are possible on coarse clocks; never decreasing
        assert first.split("_")[1] <= second.split("_")[1]

    def test_concurrent_calls_produce_distinct_ids(self):
        n = 2000
        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: new_id("invite"), range(n)))

        assert len(set(ids)) == n


class TestNewInviteCode:
    def test_length_and_alphabet(self):
        code = new_invite_code()

        assert len(code) == INVITE_CODE_LENGTH == 24
        assert set(code) <= set(INVITE_CODE_ALPHABET)

    def test_codes_are_distinct(self):
        codes = {new_invite_code() for _ in range(1000)}
        assert len(codes) == 1000
