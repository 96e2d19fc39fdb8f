import logging
import os
import suite
import seqops
from seqops import (
    SeqOpsConfig, configure, get_config, reset_config,
    SequenceError, InvalidArgumentError, EmptySequenceError, MultipleMatchesError
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


def _with_env(**env):
    """set SEQOPS_* variables, returning the previous values for restoring"""
    previous = {key: os.environ.get(key) for key in env}
    for key, value in env.items():
        os.environ[key] = value
    return previous


def _restore_env(previous):
    for key, value in previous.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value
    reset_config()


@test("config defaults are sensible")
def test_config_defaults():
    config = SeqOpsConfig()
    assert_that(config.shuffle_seed is None, "no seed by default")
    assert_that(config.log_level == "WARNING", "warning level by default")


@test("config is read from the environment")
def test_config_from_env():
    previous = _with_env(SEQOPS_SHUFFLE_SEED="17", SEQOPS_LOG_LEVEL="debug")
    try:
        reset_config()
        config = get_config()
        assert_that(config.shuffle_seed == 17, "seed parsed as int")
        assert_that(config.log_level == "DEBUG", "level upper-cased")
        assert_that(get_config() is config, "config is built once")
    finally:
        _restore_env(previous)


@test("a malformed environment seed is rejected")
def test_config_bad_env():
    previous = _with_env(SEQOPS_SHUFFLE_SEED="abc")
    try:
        reset_config()
        with assert_raises(InvalidArgumentError):
            get_config()
    finally:
        _restore_env(previous)


@test("configure overrides fields and sets the logger level")
def test_configure():
    try:
        updated = configure(shuffle_seed=5, log_level="INFO")
        assert_that(get_config() is updated and updated.shuffle_seed == 5, "override applied")
        assert_that(logging.getLogger("seqops").level == logging.INFO, "logger level applied")
    finally:
        reset_config()
        logging.getLogger("seqops").setLevel(logging.NOTSET)


@test("configure rejects unknown options and levels")
def test_configure_invalid():
    try:
        with assert_raises(InvalidArgumentError):
            configure(colour="blue")
        with assert_raises(InvalidArgumentError):
            configure(log_level="LOUD")
    finally:
        reset_config()


@test("errors share a base class and the builtin types callers expect")
def test_error_hierarchy():
    for error_type in (InvalidArgumentError, EmptySequenceError, MultipleMatchesError):
        assert_that(issubclass(error_type, SequenceError), f"{error_type.__name__} is a SequenceError")
    assert_that(issubclass(InvalidArgumentError, TypeError), "invalid arguments are TypeErrors")
    assert_that(issubclass(InvalidArgumentError, ValueError), "invalid arguments are ValueErrors")
    assert_that(issubclass(EmptySequenceError, ValueError), "empty sequences are ValueErrors")


@test("errors raised by callbacks propagate unchanged")
def test_callback_errors_propagate():
    def explode(x):
        raise KeyError(x)
    with assert_raises(KeyError):
        seqops.where([1], explode)
    with assert_raises(KeyError):
        seqops.P([1]).select(explode).to.list()


@test("the package logger has a null handler")
def test_null_handler():
    handlers = logging.getLogger("seqops").handlers
    assert_that(any(isinstance(h, logging.NullHandler) for h in handlers), "library should not configure output")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="seqops config and error test suite")
