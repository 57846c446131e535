"""
Test suite for identifier derivation

Everything in this directory is tagged ``utils``.
"""

import hashlib
import subprocess

import pytest

from exchange_it import uid as uid_module
from exchange_it.config import get_config
from exchange_it.uid import as_text, generate_uid


class TestAsText:
    """Test name part coercion"""
    
    def test_conversions(self):
        """Test text passes through, None becomes empty, others use str()"""
        assert as_text("John") == "John"
        assert as_text(None) == ""
        assert as_text(7) == "7"


class TestGenerateUid:
    """Test uid derivation from a name pair"""
    
    def test_deterministic(self):
        """Test that the same pair always yields the same uid"""
        assert generate_uid("John", "Doe") == generate_uid("John", "Doe")
    
    def test_distinct_pairs(self):
        """Test that different or swapped names yield different uids"""
        assert generate_uid("John", "Doe") != generate_uid("Jane", "Doe")
        assert generate_uid("John", "Doe") != generate_uid("Doe", "John")
    
    def test_name_boundary_is_part_of_identity(self):
        """Test that moving characters between the names changes the uid"""
        assert generate_uid("ab", "c") != generate_uid("a", "bc")
    
    def test_inputs_converted_to_text(self):
        """Test that non-text inputs hash like their text form"""
        assert generate_uid(42, None) == generate_uid("42", "")
    
    def test_default_is_sha256_hex(self):
        """Test the default digest over the JSON-framed pair"""
        uid = generate_uid("John", "Doe")
        expected = hashlib.sha256('["John", "Doe"]'.encode('utf-8')).hexdigest()
        assert uid == expected
        assert len(uid) == 64
    
    def test_explicit_algorithm(self):
        """Test that an explicit algorithm overrides the run's default"""
        assert len(generate_uid("John", "Doe", algorithm="md5")) == 32
    
    def test_algorithm_resolved_from_config_at_import(self):
        """Test the run's algorithm is the one configured when the module loaded"""
        assert uid_module.UID_HASH_ALGORITHM == get_config().uid_hash_algorithm
    
    def test_reloaded_config_does_not_change_uids(self, fresh_config):
        """Test that a uid stays the same after configuration is reloaded"""
        before = generate_uid("John", "Doe")
        fresh_config(uid_hash_algorithm="md5")
        
        assert generate_uid("John", "Doe") == before
    
    def test_unknown_algorithm(self):
        """Test that an unknown explicit algorithm is rejected by hashlib"""
        with pytest.raises(ValueError):
            generate_uid("John", "Doe", algorithm="not-a-hash")
    
    def test_non_ascii_names(self):
        """Test that non-ASCII names are hashed as UTF-8"""
        uid = generate_uid("Zoë", "Ångström")
        expected = hashlib.sha256('["Zoë", "Ångström"]'.encode('utf-8')).hexdigest()
        assert uid == expected
    
    @pytest.mark.linux_only
    def test_matches_coreutils_sha256sum(self):
        """Test the uid matches the sha256sum command line tool"""
        result = subprocess.run(
            ["sha256sum"], input='["John", "Doe"]'.encode('utf-8'),
            capture_output=True, check=True
        )
        assert generate_uid("John", "Doe") == result.stdout.decode().split()[0]
