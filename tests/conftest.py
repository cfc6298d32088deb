import json
from pathlib import Path
from unittest.mock import Mock

import pytest

FIX = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixture_text():
    def _load(name: str) -> str:
        p = FIX / name
        return p.read_text(encoding="utf-8")

    return _load


@pytest.fixture
def make_response():
    def _make(status_code: int = 200, text: str = "", json_data=None) -> Mock:
        response = Mock()
        response.status_code = status_code
        response.text = text
        if json_data is None:
            response.json.side_effect = json.JSONDecodeError("Expecting value", text, 0)
        else:
            response.json.return_value = json_data
        return response

    return _make


@pytest.fixture
def meta_file_io():
    return """
    <tr>
        <td><a href="/profil/silviu">Candale Silviu (silviu)</a></td>
        <td class="center">
            11		</td>
        <td>
            <span style="background: url('/img/32-fisier.png') no-repeat 3px center;background-size:16px;padding-left:34px;"> numere8.in / numere8.out </span> 		</td>
        <td>
            0.5 secunde
        </td>
        <td>
            <span title="Memorie totală">64 MB</span> / <span  title="Dimensiunea stivei">32 MB</span>
        </td>
        <td>
            ONI 2016, clasele XI-XII		</td>
        <td>
            Denis-Gabriel Mită		</td>
        <td class="center">
            concurs		</td>
        <td><div class="center"><a href="/detalii-evaluare/35494272">100</a></div></td>
    </tr>
    """


@pytest.fixture
def meta_std_io():
    return """
    <tr>
        <td><a href="/profil/silviu">Candale Silviu (silviu)</a></td>
        <td class="center">
            9		</td>
        <td>
            <span style="background: url('/img/32-terminal.png') no-repeat 3px center;background-size:16px;padding-left:34px;">   tastatură / ecran</span>		</td>
        <td>
            -
        </td>
        <td>
            <span title="Memorie totală">64 MB</span>
        </td>
        <td>
            -		</td>
        <td>
            -		</td>
        <td class="center">
            -		</td>
    </tr>
    """
