from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

from ...config import get_config
from ...errors import DataUnavailable
from ...logging import get_logger
from ..interface import AddressCatalog
from ..models import AddressData, AddressNode, AddressSearchResult

# Bundled sample dataset shipped with the package
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data" / "address"

REQUIRED_COLUMNS: Dict[str, List[str]] = {
    "provinces.csv": ["code", "name"],
    "cities.csv": ["code", "name", "province_code"],
    "districts.csv": ["code", "name", "city_code"],
}


@dataclass
class _Tables:
    provinces: pd.DataFrame
    cities: pd.DataFrame
    districts: pd.DataFrame


def _match_score(text: str, keyword: str) -> int:
    text = text.lower()
    if text == keyword:
        return 100
    if text.startswith(keyword):
        return 80
    if keyword in text:
        return 60
    return 0


class CsvAddressCatalog(AddressCatalog):
    """
    CSV-backed implementation.
    - Loads provinces.csv, cities.csv and districts.csv from `data_dir` once at construction.
    - Builds a code index and per-level parent → children indexes; nothing is mutated afterwards.
    """

    def __init__(self, data_dir: str | Path = None) -> None:
        self.logger = get_logger(__name__)

        if data_dir is None:
            data_dir = get_config().address_data_dir
        self.data_dir = DEFAULT_DATA_DIR if data_dir is None else Path(data_dir)

        # If the path is relative, make it relative to the repository root
        if not self.data_dir.is_absolute():
            current = Path.cwd()
            repo_root = None

            # Look up the directory tree for pyproject.toml
            for parent in [current] + list(current.parents):
                if (parent / "pyproject.toml").exists():
                    repo_root = parent
                    break

            self.data_dir = (repo_root or current) / self.data_dir

        tables = self._load_tables(self.data_dir)

        self._provinces: Tuple[AddressNode, ...] = ()
        self._cities: Tuple[AddressNode, ...] = ()
        self._districts: Tuple[AddressNode, ...] = ()
        self._by_code: Dict[str, AddressNode] = {}
        self._cities_by_province: Dict[str, List[AddressNode]] = {}
        self._districts_by_city: Dict[str, List[AddressNode]] = {}
        self._build_indexes(tables)

        self.logger.info(
            f"Loaded address catalog from {self.data_dir}: {len(tables.provinces)} provinces, "
            f"{len(tables.cities)} cities, {len(tables.districts)} districts"
        )

    # ---------- loading / index helpers ----------

    @staticmethod
    def _load_tables(data_dir: Path) -> _Tables:
        if not data_dir.exists():
            raise DataUnavailable(
                f"Address data directory not found: {data_dir}\n"
                f"Please either:\n"
                f"  1. Unset ADDRESS_DATA_DIR to use the bundled dataset\n"
                f"  2. Set ADDRESS_DATA_DIR to a directory with {', '.join(REQUIRED_COLUMNS)}"
            )

        missing_files = [f for f in REQUIRED_COLUMNS if not (data_dir / f).exists()]
        if missing_files:
            raise DataUnavailable(
                f"Required CSV files missing in {data_dir}:\n"
                f"  Missing: {', '.join(missing_files)}\n"
                f"  Expected files: {', '.join(REQUIRED_COLUMNS)}"
            )

        frames: Dict[str, pd.DataFrame] = {}
        try:
            for filename, columns in REQUIRED_COLUMNS.items():
                # Codes stay strings so leading zeros survive
                df = pd.read_csv(data_dir / filename, dtype=str, keep_default_na=False)
                df.columns = [c.strip() for c in df.columns]
                missing_cols = [c for c in columns if c not in df.columns]
                if missing_cols:
                    raise ValueError(f"{filename} lacks column(s): {', '.join(missing_cols)}")
                df = df[columns].copy()
                for col in columns:
                    df[col] = df[col].str.strip()
                frames[filename] = df
        except Exception as e:
            raise DataUnavailable(
                f"Error reading address CSV files from {data_dir}: {e}\n"
                f"Please check that the CSV files are valid and readable."
            ) from e

        return _Tables(
            provinces=frames["provinces.csv"],
            cities=frames["cities.csv"],
            districts=frames["districts.csv"],
        )

    def _build_indexes(self, tables: _Tables) -> None:
        provinces = []
        for row in tables.provinces.itertuples(index=False):
            node = AddressNode(code=row.code, name=row.name, type="province")
            provinces.append(node)
            self._by_code[node.code] = node
        self._provinces = tuple(provinces)

        cities = []
        for row in tables.cities.itertuples(index=False):
            node = AddressNode(code=row.code, name=row.name, type="city", parent_code=row.province_code)
            cities.append(node)
            self._by_code[node.code] = node
            self._cities_by_province.setdefault(node.parent_code, []).append(node)
        self._cities = tuple(cities)

        districts = []
        for row in tables.districts.itertuples(index=False):
            node = AddressNode(code=row.code, name=row.name, type="district", parent_code=row.city_code)
            districts.append(node)
            self._by_code[node.code] = node
            self._districts_by_city.setdefault(node.parent_code, []).append(node)
        self._districts = tuple(districts)

    # ---------- interface implementation ----------

    def list_provinces(self) -> List[AddressNode]:
        return list(self._provinces)

    def list_cities(self, province_code: str) -> List[AddressNode]:
        cities = self._cities_by_province.get(province_code)
        if cities is None:
            self.logger.debug(f"No cities for province code {province_code!r}")
            return []
        return list(cities)

    def list_districts(self, city_code: str) -> List[AddressNode]:
        districts = self._districts_by_city.get(city_code)
        if districts is None:
            self.logger.debug(f"No districts for city code {city_code!r}")
            return []
        return list(districts)

    def get_node(self, code: str) -> Optional[AddressNode]:
        return self._by_code.get(code)

    def get_province_code_by_name(self, name: str) -> Optional[str]:
        for province in self._provinces:
            if province.name == name:
                return province.code
        return None

    def get_city_code_by_name(self, name: str, province_code: str) -> Optional[str]:
        for city in self._cities_by_province.get(province_code, ()):
            if city.name == name:
                return city.code
        return None

    def get_district_code_by_name(self, name: str, city_code: str) -> Optional[str]:
        for district in self._districts_by_city.get(city_code, ()):
            if district.name == name:
                return district.code
        return None

    def search(self, keyword: str, limit: Optional[int] = None) -> List[AddressSearchResult]:
        config = get_config()
        if limit is None:
            limit = config.address_search_limit

        keyword = (keyword or "").strip().lower()
        if len(keyword) < config.address_search_min_length:
            return []

        results: List[AddressSearchResult] = []

        for province in self._provinces:
            score = _match_score(province.name, keyword)
            if score:
                results.append(AddressSearchResult(province=province, full_path=province.name, score=score))

        for city in self._cities:
            score = _match_score(city.name, keyword)
            province = self._by_code.get(city.parent_code)
            if score and province is not None:
                results.append(AddressSearchResult(
                    province=province,
                    city=city,
                    full_path=f"{province.name} {city.name}",
                    score=score,
                ))

        for district in self._districts:
            score = _match_score(district.name, keyword)
            if not score:
                continue
            city = self._by_code.get(district.parent_code)
            province = self._by_code.get(city.parent_code) if city is not None else None
            if province is None:
                continue
            results.append(AddressSearchResult(
                province=province,
                city=city,
                district=district,
                full_path=f"{province.name} {city.name} {district.name}",
                score=score,
            ))

        # sorted() is stable: equal scores keep province → city → district order
        results = sorted(results, key=lambda r: r.score, reverse=True)
        return results[: int(limit)]

    def validate_address(self, address: AddressData) -> bool:
        if not address.province or not address.city or not address.district:
            return False

        province_code = self.get_province_code_by_name(address.province)
        if province_code is None:
            return False

        city_code = self.get_city_code_by_name(address.city, province_code)
        if city_code is None:
            return False

        return self.get_district_code_by_name(address.district, city_code) is not None
