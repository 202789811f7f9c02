# -*- coding: utf-8 -*-
"""
ESPA Metadata Reader Tests - Parse espa_metadata XML into the model.

Author
------
geoint.org

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Third-party
import pytest

# Package internal
from espa_formats.IO.espa_xml import read_espa_metadata
from espa_formats.exceptions import ValidationError
from espa_formats.models import ClassValue, LatLon
from espa_formats.vocabulary import DataType


ESPA_XML = """<?xml version="1.0" encoding="UTF-8"?>
<espa_metadata version="1.0" xmlns="http://espa.cr.usgs.gov/v1.0">
  <global_metadata>
    <data_provider>USGS/EROS</data_provider>
    <satellite>LANDSAT_5</satellite>
    <instrument>TM</instrument>
    <acquisition_date>1987-04-02</acquisition_date>
    <level1_production_date>2013-10-24T21:44:32Z</level1_production_date>
    <solar_angles zenith="39.11" azimuth="133.67" units="degrees"/>
    <wrs system="2" path="46" row="28"/>
    <lpgs_metadata_file>LT50460281987092XXX01_MTL.txt</lpgs_metadata_file>
    <corner location="UL" latitude="47.52" longitude="-123.95"/>
    <corner location="LR" latitude="45.42" longitude="-120.70"/>
    <bounding_coordinates>
      <west>-123.95</west>
      <east>-3333.0</east>
      <north>47.52</north>
      <south>45.42</south>
    </bounding_coordinates>
    <projection_information projection="UTM" datum="WGS84" units="meters">
      <corner_point location="UL" x="399915.0" y="5266815.0"/>
      <corner_point location="LR" x="642615.0" y="5050185.0"/>
      <grid_origin>CENTER</grid_origin>
      <utm_proj_params>
        <zone_code>10</zone_code>
      </utm_proj_params>
    </projection_information>
  </global_metadata>
  <bands>
    <band product="sr_refl" name="sr_band1" category="image"
          data_type="INT16" nlines="7231" nsamps="8091" fill_value="-9999"
          saturate_value="20000" scale_factor="0.0001">
      <short_name>LT5SR</short_name>
      <long_name>band 1 surface reflectance</long_name>
      <file_name>LT50460281987092XXX01_sr_band1.img</file_name>
      <pixel_size x="30" y="30" units="meters"/>
      <data_units>reflectance</data_units>
      <valid_range min="-2000" max="16000"/>
      <toa_reflectance gain="0.0012" bias="-0.0048"/>
      <app_version>LEDAPS_2.0.0</app_version>
      <production_date>2014-01-01T00:00:00Z</production_date>
    </band>
    <band product="sr_refl" name="sr_cloud_qa" category="qa"
          data_type="UINT8" nlines="7231" nsamps="8091" fill_value="-3333">
      <long_name>cloud QA</long_name>
      <file_name>LT50460281987092XXX01_sr_cloud_qa.img</file_name>
      <pixel_size x="30" y="30" units="meters"/>
      <valid_range min="-3333" max="255"/>
      <bitmap_description>
        <bit num="1">cloud</bit>
        <bit num="0">unused</bit>
      </bitmap_description>
      <class_values>
        <class num="0">clear</class>
        <class num="1">cloud</class>
      </class_values>
    </band>
  </bands>
</espa_metadata>
"""


@pytest.fixture
def xml_file(tmp_path):
    path = tmp_path / "LT50460281987092XXX01.xml"
    path.write_text(ESPA_XML)
    return path


class TestGlobalMetadata:

    def test_text_fields(self, xml_file):
        gm = read_espa_metadata(xml_file).global_metadata
        assert gm.data_provider == 'USGS/EROS'
        assert gm.instrument == 'TM'
        assert gm.lpgs_metadata_file == 'LT50460281987092XXX01_MTL.txt'

    def test_numeric_fields(self, xml_file):
        gm = read_espa_metadata(xml_file).global_metadata
        assert gm.solar_zenith == pytest.approx(39.11)
        assert (gm.wrs_system, gm.wrs_path, gm.wrs_row) == (2, 46, 28)
        assert gm.ul_corner == LatLon(47.52, -123.95)
        assert gm.lr_corner == LatLon(45.42, -120.70)

    def test_bounds_sentinel(self, xml_file):
        gm = read_espa_metadata(xml_file).global_metadata
        assert gm.west_bound == pytest.approx(-123.95)
        assert gm.east_bound is None

    def test_projection(self, xml_file):
        proj = read_espa_metadata(xml_file).global_metadata.projection
        assert proj.proj_type == 'UTM'
        assert proj.ul_corner == (399915.0, 5266815.0)
        assert proj.pixel_size == (30.0, 30.0)
        assert proj.utm_zone == 10
        assert proj.datum == 'WGS84'


class TestBands:

    def test_band_order_and_required_fields(self, xml_file):
        md = read_espa_metadata(xml_file)
        assert md.band_names == ['sr_band1', 'sr_cloud_qa']
        band = md.bands[0]
        assert band.data_type is DataType.INT16
        assert band.dims == (7231, 8091)
        assert band.file_name == 'LT50460281987092XXX01_sr_band1.img'

    def test_optional_fields(self, xml_file):
        band = read_espa_metadata(xml_file).bands[0]
        assert band.fill_value == -9999
        assert band.saturate_value == 20000
        assert band.scale_factor == pytest.approx(0.0001)
        assert band.add_offset is None
        assert band.valid_range == (-2000.0, 16000.0)
        assert band.toa_gain == pytest.approx(0.0012)
        assert band.app_version == 'LEDAPS_2.0.0'

    def test_sentinels_in_band(self, xml_file):
        band = read_espa_metadata(xml_file).bands[1]
        assert band.fill_value is None
        assert band.valid_range is None
        assert band.toa_gain is None

    def test_descriptions(self, xml_file):
        band = read_espa_metadata(xml_file).bands[1]
        assert band.bitmap_description == ('unused', 'cloud')
        assert band.class_values == (ClassValue(0, 'clear'),
                                     ClassValue(1, 'cloud'))


class TestErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_espa_metadata(tmp_path / "missing.xml")

    def test_malformed_xml(self, tmp_path):
        path = tmp_path / "bad.xml"
        path.write_text("<espa_metadata><global_metadata>")
        with pytest.raises(ValidationError):
            read_espa_metadata(path)

    def test_no_global_metadata(self, tmp_path):
        path = tmp_path / "empty.xml"
        path.write_text("<espa_metadata><bands/></espa_metadata>")
        with pytest.raises(ValidationError, match='global_metadata'):
            read_espa_metadata(path)

    def test_unsupported_data_type(self, tmp_path, xml_file):
        path = tmp_path / "complex.xml"
        path.write_text(xml_file.read_text().replace('"UINT8"', '"CINT16"'))
        with pytest.raises(ValidationError, match='CINT16'):
            read_espa_metadata(path)
