import logging

import pytest

from confstore import ConfigStore, NoSuchKey, RequiredSettingError, TypeMismatch


@pytest.fixture
def config(sample_document):
    return ConfigStore.loads(sample_document)


@pytest.fixture
def fail_fast_config(sample_document):
    return ConfigStore.loads(sample_document, fail_fast=True)


class TestRequiredAccessors:
    """Required accessors in library mode raise RequiredSettingError."""

    def test_get_required(self, config):
        assert config.get_required("ratio") == 3.9

    def test_get_required_missing(self, config):
        with pytest.raises(RequiredSettingError, match="Configuration parameter missing is mandatory") as exc_info:
            config.get_required("missing")
        assert exc_info.value.key == "missing"
        assert isinstance(exc_info.value.__cause__, NoSuchKey)

    def test_get_required_string(self, config):
        assert config.get_required_string("name") == "ingest-service"

    def test_get_required_string_mismatch(self, config):
        with pytest.raises(RequiredSettingError, match="is invalid") as exc_info:
            config.get_required_string("port")
        assert isinstance(exc_info.value.__cause__, TypeMismatch)

    def test_get_required_int64(self, config):
        assert config.get_required_int64("port") == 8080
        assert config.get_required_int64("negative") == -3

    def test_get_required_uint64(self, config):
        assert config.get_required_uint64("port") == 8080

    def test_get_required_uint64_negative(self, config):
        with pytest.raises(RequiredSettingError):
            config.get_required_uint64("negative")

    def test_get_required_string_slice(self, config):
        assert config.get_required_string_slice("hosts") == ["alpha", "beta"]

    def test_get_required_string_slice_of_numbers(self):
        config = ConfigStore.loads(b'{"arr": [1, 2]}')
        with pytest.raises(RequiredSettingError, match=r"arr\[0\]"):
            config.get_required_string_slice("arr")

    def test_get_required_int64_slice(self, config):
        assert config.get_required_int64_slice("offsets") == [-1, 2, -3]

    def test_get_required_uint64_slice(self, config):
        assert config.get_required_uint64_slice("ports") == [80, 443]

    def test_get_required_slice_fails_on_any_element(self):
        config = ConfigStore.loads(b'{"arr": [1, 2, "three"]}')
        with pytest.raises(RequiredSettingError, match=r"arr\[2\]"):
            config.get_required_int64_slice("arr")

    def test_get_required_sub_config(self, config):
        assert config.get_required_sub_config("database").get_required_int64("port") == 5432

    def test_get_required_sub_config_mismatch(self, config):
        with pytest.raises(RequiredSettingError):
            config.get_required_sub_config("hosts")

    def test_library_mode_does_not_exit(self, config):
        with pytest.raises(RequiredSettingError):
            config.get_required("missing")


class TestFailFast:
    """Required accessors on a fail_fast store log the failure and exit with status 1."""

    def test_missing_key_exits(self, fail_fast_config, caplog):
        with pytest.raises(SystemExit) as exc_info:
            fail_fast_config.get_required("missing")
        assert exc_info.value.code == 1
        errors = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
        assert "Configuration parameter missing is mandatory" in errors

    def test_type_mismatch_exits(self, fail_fast_config):
        with pytest.raises(SystemExit) as exc_info:
            fail_fast_config.get_required_string("port")
        assert exc_info.value.code == 1

    def test_string_slice_of_numbers_exits(self):
        config = ConfigStore.loads(b'{"arr": [1, 2]}', fail_fast=True)
        with pytest.raises(SystemExit):
            config.get_required_string_slice("arr")

    def test_present_values_do_not_exit(self, fail_fast_config):
        assert fail_fast_config.get_required_string_slice("hosts") == ["alpha", "beta"]
        assert fail_fast_config.get_required_uint64("port") == 8080

    def test_sub_config_keeps_fail_fast(self, fail_fast_config):
        database = fail_fast_config.get_required_sub_config("database")
        with pytest.raises(SystemExit):
            database.get_required_string("user")

    def test_optional_accessors_never_exit(self, fail_fast_config):
        with pytest.raises(NoSuchKey):
            fail_fast_config.get("missing")
        with pytest.raises(TypeMismatch):
            fail_fast_config.get_int64("name")

    def test_load_with_fail_fast(self, config_file):
        config = ConfigStore.load(config_file, fail_fast=True)
        assert config.fail_fast is True
        with pytest.raises(SystemExit):
            config.get_required("missing")
