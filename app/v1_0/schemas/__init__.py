from .list_schema import (
    ListParams,
    StatusFilters,
    TitleFilters,
    LicenseFilters,
    RecordStatus,
    LicenseFilter,
    )
