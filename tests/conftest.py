from __future__ import annotations

import shutil
import uuid
from collections import OrderedDict
from getpass import getuser
from pathlib import Path
from tempfile import gettempdir

import numpy as np
import pytest

from dotthz import DotthzFile, DotthzMetaData

_tmptestdir = Path(gettempdir()) / f"dotthz-tests-{getuser()}-{uuid.uuid4()!s}"


@pytest.fixture(scope="session")
def tmptestdir():
    Path(_tmptestdir).mkdir(parents=True, exist_ok=True)
    return _tmptestdir


def pytest_sessionfinish(session, exitstatus):  # noqa: ARG001
    if exitstatus == 0:
        shutil.rmtree(_tmptestdir, ignore_errors=True)


@pytest.fixture
def meta_data():
    return DotthzMetaData(
        user="Test User",
        email="test@example.com",
        orcid="0000-0001-2345-6789",
        institution="Test Institute",
        description="Test description",
        md=OrderedDict(
            [
                ("Thickness (mm)", "0.52"),
                ("Temperature (K)", "293"),
                ("Sample", "PVDF"),
            ]
        ),
        ds_description=["ds1", "ds2"],
        version="1.00",
        mode="Test mode",
        instrument="Test instrument",
        time="12:34:56",
        date="2024-11-08",
    )


@pytest.fixture
def thz_file(tmp_path, meta_data):
    path = tmp_path / "sample.thz"
    with DotthzFile.create(path) as f:
        f.add_group("Measurement", meta_data)
        f.add_dataset(
            "Measurement",
            "ds1",
            np.array([[1.0, 2.0], [3.0, 4.0], [3.0, 4.0]], dtype=np.float32),
        )
        f.add_dataset("Measurement", "ds2", np.linspace(0, 1, 11))
        f.add_group("Reference", DotthzMetaData(user="Someone Else"))
    return path
