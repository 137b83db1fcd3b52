"""Integration tests for BcryptPasswordService.

Architecture:
- Tests against the real bcrypt library (no mocking)
- Low cost factor keeps the suite fast
"""

import pytest

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService


@pytest.mark.integration
class TestBcryptPasswordServiceIntegration:
    """Integration tests for password hashing and verification."""

    def test_hash_has_bcrypt_format(self):
        """Test hashes are 60-character $2b$ strings with the cost factor."""
        service = BcryptPasswordService(cost_factor=4)

        password_hash = service.hash_password("p1")

        assert password_hash.startswith("$2b$04$")
        assert len(password_hash) == 60

    def test_hashes_are_salted(self):
        service = BcryptPasswordService(cost_factor=4)

        assert service.hash_password("p1") != service.hash_password("p1")

    def test_verify_correct_and_wrong_password(self):
        service = BcryptPasswordService(cost_factor=4)
        password_hash = service.hash_password("p1")

        assert service.verify_password("p1", password_hash)
        assert not service.verify_password("p2", password_hash)

    def test_verify_malformed_hash_returns_false(self):
        """Test a corrupt stored hash never raises."""
        service = BcryptPasswordService(cost_factor=4)

        assert not service.verify_password("p1", "not-a-bcrypt-hash")

    def test_long_password_truncated_consistently(self):
        """Test passwords past 72 bytes hash and verify without error."""
        service = BcryptPasswordService(cost_factor=4)
        long_password = "x" * 100

        password_hash = service.hash_password(long_password)

        assert service.verify_password(long_password, password_hash)

    @pytest.mark.parametrize("cost_factor", [3, 32])
    def test_cost_factor_out_of_range(self, cost_factor):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost_factor)
