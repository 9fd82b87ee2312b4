"""
Pytest configuration and fixtures for disclosure-sorter tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from disclosure_sorter.utils.clock import fixed_clock


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't touch the file system"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that read or write real files"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that run the command-line interface"
    )


# =======================
# CLOCK FIXTURES
# =======================

FIXED_NOW = datetime(2025, 3, 14, 9, 26, 53, 589000, tzinfo=timezone.utc)
FIXED_TIMESTAMP = "2025-03-14T09:26:53.589Z"


@pytest.fixture
def clock():
    """Clock pinned to FIXED_NOW"""
    return fixed_clock(FIXED_NOW)


# =======================
# RECORD FIXTURES
# =======================

def make_record(**overrides) -> dict:
    """Build a fully populated raw disclosure record, overriding any key."""
    record = {
        "id": "17",
        "fechaCaptura": "2024-05-02T10:00:00Z",
        "ejercicioFiscal": "2024",
        "ramo": {"clave": 6, "valor": "HACIENDA Y CRÉDITO PÚBLICO"},
        "rfc": "ROMA800101XXX",
        "curp": "ROMA800101HDFXXX01",
        "nombres": "RODOLFO BENJAMIN",
        "primerApellido": "MARTINEZ",
        "segundoApellido": "ROSAS",
        "genero": {"clave": "M", "valor": "MASCULINO"},
        "institucionDependencia": {
            "nombre": "SECRETARÍA DE HACIENDA",
            "siglas": "SHCP",
            "clave": "06",
        },
        "puesto": {"nombre": "JEFE DE DEPARTAMENTO", "nivel": "O11"},
        "tipoArea": [
            {"clave": "R", "valor": "RESPONSABLE"},
            {"clave": "T", "valor": "TÉCNICA"},
        ],
        "nivelResponsabilidad": [
            {"clave": "A", "valor": "ATENCIÓN"},
            {"clave": "T", "valor": "TRAMITACIÓN"},
        ],
        "observaciones": "SIN OBSERVACIONES",
        "tipoProcedimiento": [{"clave": 1, "valor": "Contrataciones Públicas"}],
        "superiorInmediato": {"nombres": "LAURA", "primerApellido": "DIAZ"},
    }
    record.update(overrides)
    return record


@pytest.fixture
def full_record() -> dict:
    """A fully populated raw record declaring one procedure type"""
    return make_record()


@pytest.fixture
def mixed_records() -> list:
    """
    One record of every kind:
    accepted (x3), flagged (x1), rejected for a missing surname (x1),
    rejected for not being an object (x1)
    """
    return [
        {"id": "1", "nombres": "ANA", "primerApellido": "LOPEZ",
         "tipoProcedimiento": [{"valor": "LICITACIÓN PÚBLICA"}]},
        {"id": "2", "nombres": "ALEJANDRO JAVIER", "primerApellido": "ROMERO",
         "tipoProcedimiento": [{"valor": "CONCESIÓN"}, {"valor": "VENTA"}]},
        {"id": "3", "nombres": "PEDRO", "tipoProcedimiento": [{"valor": "VENTA"}]},
        make_record(id="4", nombres="MARIA ELENA", primerApellido="GARCIA",
                    tipoProcedimiento=[{"valor": "Otorgamiento de Concesiones"}]),
        "not a record",
        {"nombres": "CARLOS", "primerApellido": "TORRES"},
    ]


# =======================
# FILE SYSTEM FIXTURES
# =======================

def write_json(path: Path, data) -> Path:
    """Write data as UTF-8 JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def source_tree(tmp_path, mixed_records) -> Path:
    """
    Source directory with an array file, single-object files in a nested
    directory, a malformed file and a non-JSON file.
    """
    source = tmp_path / "origen"
    write_json(source / "a_lote.json", mixed_records[:3])
    write_json(source / "b_sub" / "registro_4.json", mixed_records[3])
    write_json(source / "b_sub" / "registro_5.JSON", mixed_records[4])
    write_json(source / "c_ultimo.json", mixed_records[5])
    (source / "roto.json").write_text("{ not json", encoding="utf-8")
    (source / "notas.txt").write_text("ignored", encoding="utf-8")
    return source


@pytest.fixture
def record_factory():
    """Factory building raw records from the fully populated template"""
    return make_record
