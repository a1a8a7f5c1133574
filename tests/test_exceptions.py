import pytest

from fsmodel.exceptions import (
    DirectoryAlreadyExistsError,
    DirectoryDoesNotExistError,
    FileAlreadyExistsError,
    FileIsOpenError,
    FileNotFoundInPartitionError,
    FileSystemError,
    InvalidMoveError,
    InvalidPathError,
    InvalidSeekError,
    InvalidTruncateError,
    NotEnoughSpaceError,
    TooManyOpenFilesError,
)


def test_message_without_detail_is_prefix():
    assert str(FileNotFoundInPartitionError()) == "File not found"
    assert str(NotEnoughSpaceError()) == "Not enough space"
    assert str(FileIsOpenError()) == "Operation not permitted on an opened file"
    assert str(DirectoryAlreadyExistsError()) == "Directory already exists"
    assert str(DirectoryDoesNotExistError()) == "Directory does not exist"
    assert str(TooManyOpenFilesError()) == "Too many open files"
    assert str(FileAlreadyExistsError()) == "File already exists"
    assert str(InvalidSeekError()) == "Invalid seek"
    assert str(InvalidMoveError()) == "Invalid move"
    assert str(InvalidTruncateError()) == "Invalid truncate"
    assert str(InvalidPathError()) == "Invalid path"


def test_message_with_detail():
    detail = "/dev/a/foo.txt"
    errors = [
        (FileNotFoundInPartitionError(detail), "File not found"),
        (NotEnoughSpaceError(detail), "Not enough space"),
        (FileIsOpenError(detail), "Operation not permitted on an opened file"),
        (DirectoryAlreadyExistsError(detail), "Directory already exists"),
        (DirectoryDoesNotExistError(detail), "Directory does not exist"),
        (TooManyOpenFilesError(detail), "Too many open files"),
        (FileAlreadyExistsError(detail), "File already exists"),
        (InvalidSeekError(detail), "Invalid seek"),
        (InvalidMoveError(detail), "Invalid move"),
        (InvalidTruncateError(detail), "Invalid truncate"),
        (InvalidPathError(detail), "Invalid path"),
    ]
    for err, prefix in errors:
        assert str(err) == prefix + ": /dev/a/foo.txt"
        assert err.detail == detail


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (FileNotFoundInPartitionError, "File not found"),
        (NotEnoughSpaceError, "Not enough space"),
        (FileIsOpenError, "Operation not permitted on an opened file"),
        (DirectoryAlreadyExistsError, "Directory already exists"),
        (DirectoryDoesNotExistError, "Directory does not exist"),
        (TooManyOpenFilesError, "Too many open files"),
        (FileAlreadyExistsError, "File already exists"),
        (InvalidSeekError, "Invalid seek"),
        (InvalidMoveError, "Invalid move"),
        (InvalidTruncateError, "Invalid truncate"),
        (InvalidPathError, "Invalid path"),
    ],
)
def test_subclass_of_base_class(cls, prefix):
    err = cls("x")
    assert issubclass(cls, FileSystemError)
    assert isinstance(err, FileSystemError)
    assert str(err) == prefix + ": x"
    assert err.detail == "x"


def test_base_class_direct_call():
    err = FileSystemError("x")
    assert err.detail == "x"
    assert "x" in str(err)


def test_empty_detail_treated_as_absent():
    err = NotEnoughSpaceError("")
    assert str(err) == "Not enough space"
    assert err.detail == ""


def test_specific_class_is_not_caught_by_sibling():
    err = FileIsOpenError("delete: /a/b")
    assert not isinstance(err, FileNotFoundInPartitionError)
    assert str(err) == "Operation not permitted on an opened file: delete: /a/b"