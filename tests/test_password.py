"""
Tests for bcrypt password hashing.
"""

import pytest

from auth.password import (
    dummy_hash,
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("p4ss", rounds=4)
        assert hashed != "p4ss"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        assert hash_password("p4ss", rounds=4) != hash_password("p4ss", rounds=4)

    def test_cost_factor_is_embedded(self):
        assert hash_password("p4ss", rounds=5).split("$")[2] == "05"

    def test_verify_roundtrip(self):
        hashed = hash_password("p4ss", rounds=4)
        assert verify_password("p4ss", hashed)
        assert not verify_password("wrong", hashed)

    def test_verify_garbage_hash_is_false(self):
        assert verify_password("p4ss", "not-a-bcrypt-hash") is False

    @pytest.mark.asyncio
    async def test_async_variants(self):
        hashed = await hash_password_async("p4ss", rounds=4)
        assert await verify_password_async("p4ss", hashed)
        assert not await verify_password_async("nope", hashed)


class TestLongPasswords:
    def test_over_72_bytes_hashes_and_verifies(self):
        password = "x" * 80
        hashed = hash_password(password, rounds=4)
        assert verify_password(password, hashed)

    def test_only_first_72_bytes_count(self):
        hashed = hash_password("a" * 72 + "tail-one", rounds=4)
        assert verify_password("a" * 72 + "tail-two", hashed)
        assert not verify_password("a" * 71, hashed)

    def test_multibyte_cut_mid_character(self):
        password = "密码" * 20  # 120 bytes in UTF-8
        hashed = hash_password(password, rounds=4)
        assert verify_password(password, hashed)


class TestDummyHash:
    def test_is_cached_per_cost(self):
        assert dummy_hash(4) is dummy_hash(4)
        assert dummy_hash(4).split("$")[2] == "04"
