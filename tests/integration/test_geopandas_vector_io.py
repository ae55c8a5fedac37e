"""
GeoPandasVectorIO integration tests - real GDAL via pyogrio.

Skipped when geopandas/pyogrio are not installed or the GDAL build has no
KML read driver.
"""

import os

import pytest

gpd = pytest.importorskip("geopandas")
pyogrio = pytest.importorskip("pyogrio")

if not any("r" in pyogrio.list_drivers().get(name, "") for name in ("KML", "LIBKML")):
    pytest.skip("GDAL build has no KML driver", allow_module_level=True)

from core.conversion_controller import ConversionRunController  # noqa: E402
from exceptions import ConfigurationError, ContractViolationError, DatasetReadError  # noqa: E402
from infrastructure.vector_io import GeoPandasVectorIO, register_drivers  # noqa: E402
from tests.factories.archive_factories import make_kml, make_kmz, make_malformed_kmz  # noqa: E402
from tests.factories.vector_fakes import FakeLayer  # noqa: E402


@pytest.fixture
def vector_io():
    return GeoPandasVectorIO()


@pytest.fixture
def kml_file(tmp_path):
    path = tmp_path / "doc.kml"
    path.write_text(make_kml(placemarks=3), encoding="utf-8")
    return str(path)


class TestRegisterDrivers:

    def test_idempotent(self):
        register_drivers()
        register_drivers()

    def test_unsupported_driver(self):
        with pytest.raises(ConfigurationError):
            register_drivers(("Not A Driver",))


class TestReadWrite:

    def test_open_kml(self, vector_io, kml_file):
        with vector_io.open(kml_file) as source:
            assert source.layer_count >= 1
            assert source.get_layer(0).feature_count == 3

    def test_layer_index_out_of_range(self, vector_io, kml_file):
        with vector_io.open(kml_file) as source:
            with pytest.raises(DatasetReadError):
                source.get_layer(source.layer_count)

    def test_missing_file(self, vector_io, tmp_path):
        with pytest.raises(DatasetReadError):
            vector_io.open(str(tmp_path / "missing.kml"))

    def test_write_only_open_rejected(self, vector_io, kml_file):
        with pytest.raises(ContractViolationError):
            vector_io.open(kml_file, read_only=False)

    def test_copy_layer_writes_shapefile(self, vector_io, kml_file, tmp_path):
        out_dir = str(tmp_path / "out" / "20-006")
        with vector_io.open(kml_file) as source:
            layer = source.get_layer(0)
            dataset = vector_io.create_dataset(out_dir, "ESRI Shapefile")
            written = dataset.copy_layer(layer, "20-006")

        extensions = {os.path.splitext(p)[1] for p in written}
        assert {".shp", ".shx", ".dbf", ".prj"} <= extensions
        assert len(gpd.read_file(os.path.join(out_dir, "20-006.shp"))) == 3

    def test_copy_foreign_layer_rejected(self, vector_io, tmp_path):
        dataset = vector_io.create_dataset(str(tmp_path / "out"), "ESRI Shapefile")
        with pytest.raises(ContractViolationError):
            dataset.copy_layer(FakeLayer("x", 1), "x")


class TestEndToEnd:

    def test_batch_run(self, conversion_config, input_folder, output_folder):
        make_kmz(str(input_folder / "20-006 GIS.kmz"), placemarks=2)
        make_kmz(str(input_folder / "nested" / "21-114 gis.kmz"), placemarks=5)
        bad = make_malformed_kmz(str(input_folder / "broken.kmz"))
        vector_io = GeoPandasVectorIO(conversion_config.output_driver)

        summary = ConversionRunController(conversion_config, reader=vector_io, writer=vector_io).run()

        assert summary.summary_line == "Successfully converted 2 / 3"
        assert summary.failed_inputs == [bad]
        for name, features in (("20-006", 2), ("21-114", 5)):
            for ext in ("shp", "shx", "dbf", "prj"):
                assert (output_folder / name / f"{name}.{ext}").is_file()
            assert len(gpd.read_file(str(output_folder / name / f"{name}.shp"))) == features
        assert not os.path.exists(conversion_config.workspace_path)
