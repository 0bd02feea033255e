"""USGS Water Services instantaneous-values client.

Parameter codes:
    00065 = Gage height (feet)
    62614 = Lake or reservoir water surface elevation above NGVD 1929 (feet)
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from lakescope import config
from lakescope.sources.base import BaseSource
from lakescope.utils.result import FetchResult

logger = logging.getLogger(__name__)


class USGSClient(BaseSource):
    """Fetches water data for a USGS site, falling back to nearby stations.

    Example:
        >>> client = USGSClient()
        >>> result = client.fetch_water_data("07335700", period="P1D")
        >>> if result.ok:
        ...     print(result.value["meta"]["siteId"])
    """

    SOURCE_NAME = "USGS"

    def __init__(
        self,
        base_url: str = config.USGS_IV_URL,
        alternate_sites: Optional[list[str]] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.base_url = base_url
        self.alternate_sites = (
            config.ALTERNATE_SITE_IDS if alternate_sites is None else alternate_sites
        )

    @staticmethod
    def build_params(site_id: str, period: str, parameter_cd: str) -> dict[str, str]:
        return {
            "format": "json",
            "sites": site_id,
            "parameterCd": parameter_cd,
            "period": period,
        }

    def fetch_site(self, site_id: str, period: str, parameter_cd: str) -> FetchResult[dict]:
        """Fetch one site without fallback."""
        logger.info(f"Fetching USGS site {site_id} ({parameter_cd}, {period})")
        return self._request_json(
            "GET", self.base_url, params=self.build_params(site_id, period, parameter_cd)
        )

    def fetch_water_data(
        self,
        site_id: str = config.DEFAULT_SITE_ID,
        period: str = config.DEFAULT_PERIOD,
        parameter_cd: str = config.DEFAULT_PARAMETER_CD,
    ) -> FetchResult[dict]:
        """Fetch site data, trying alternate stations if the primary fails.

        Alternates are queried for gage height only. The returned payload is
        the USGS body with a "meta" block naming the station actually used.

        Args:
            site_id: Primary USGS site number
            period: ISO-8601 duration (e.g. "P7D")
            parameter_cd: Comma-separated parameter codes

        Returns:
            FetchResult with the annotated payload, or the primary site's error
        """
        primary = self.fetch_site(site_id, period, parameter_cd)
        if primary.ok:
            return FetchResult.success(
                {
                    **primary.value,
                    "meta": {
                        "source": "USGS",
                        "siteId": site_id,
                        "timestamp": datetime.now(timezone.utc).isoformat(),
                        "fallback": False,
                    },
                }
            )

        logger.warning(f"Primary USGS site {site_id} failed: {primary.error}")
        for alt_site in self.alternate_sites:
            if alt_site == site_id:
                continue
            alt = self.fetch_site(alt_site, period, config.ALTERNATE_PARAMETER_CD)
            if alt.ok:
                logger.info(f"Using nearby USGS station {alt_site}")
                return FetchResult.success(
                    {
                        **alt.value,
                        "meta": {
                            "source": "USGS",
                            "siteId": alt_site,
                            "timestamp": datetime.now(timezone.utc).isoformat(),
                            "fallback": True,
                            "note": f"Primary site {site_id} unavailable, using nearby station {alt_site}",
                        },
                    }
                )

        return primary
