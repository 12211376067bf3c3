from project_bootstrap.licenses.picker import (
    APACHE_2_0,
    match_licenses,
    needs_notice,
    pick_license,
)

__all__ = ["APACHE_2_0", "match_licenses", "needs_notice", "pick_license"]
