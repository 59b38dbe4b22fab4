import sys
from pathlib import Path

import pytest

# Import the in-repo strided_blas ahead of any installed copy
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def isolated_config():
    from strided_blas.strided_blas import Session

    with Session(
        fast_path=True, raise_on_error=False, zero_stride_policy="skip", use_jit=False
    ) as cfg:
        yield cfg
