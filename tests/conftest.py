import pandas as pd
import pytest

from stairval.notepad import Notepad, create_notepad


@pytest.fixture
def notepad() -> Notepad:
    return create_notepad("measurements")


@pytest.fixture
def measurements_table() -> pd.DataFrame:
    """
    Small table with one person per category plus one invalid
    and one incomplete row.
    """
    return pd.DataFrame(
        {
            "weight_in_kilograms": [50, 80, 100, 120, -70, None],
            "height_in_meters": [2.0, 1.80, 1.90, 1.80, 1.70, 1.75],
        },
        index=["PAT1", "PAT2", "PAT3", "PAT4", "PAT5", "PAT6"],
    )
