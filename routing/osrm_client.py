#Purpose: The OSRM “adapter/client”.
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#coordinate formatting (lon,lat)
#URL construction (/table/v1/{profile}/...)
#error handling (network, HTTP status, OSRM "code")
#parsing response JSON into your internal shape
#It should not contain caching rules or travel-mode policy.


from dotenv import load_dotenv
import os
from typing import List, Tuple, Dict, Optional
import requests

# Read OSRM base URL from environment
# Example in .env:
# OSRM_BASE_URL=https://router.project-osrm.org
load_dotenv()
BASE_URL = os.getenv("OSRM_BASE_URL", "https://router.project-osrm.org")

# Internal coordinate type: (lat, lon)
LatLon = Tuple[float, float]

class OSRMError(Exception):
    """Raised when OSRM cannot answer: network error, bad HTTP status or non-"Ok" code."""
    pass

class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Convert internal (lat, lon) → OSRM (lon,lat)
    - Return normalized outputs

    """
    def __init__(self, base_url: Optional[str] = None, timeout: int = 10):
        self.base_url = (base_url or BASE_URL or "").rstrip("/")
        self.timeout = timeout #the time to wait for a response from OSRM before giving up

        if not self.base_url:
            raise ValueError("OSRM base URL not set. Please set OSRM_BASE_URL in the .env file.")

        #----------------
        # Internal helper methods for coordinate formatting, URL construction, error handling, etc.
        #----------------
    def format_coordinates(self, coords: List[LatLon]) -> str:

        """Convert list of (lat, lon) to OSRM format 'lon,lat;lon,lat;...'"""
        return ';'.join([f"{lon},{lat}" for lat, lon in coords])

    def _get(self, url: str, params: Dict[str, str]) -> dict:
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json() #OSRM returns a JSON body with a "code" field
        except requests.exceptions.RequestException as e:
            raise OSRMError(f"OSRM request failed: {e}") from e
        except ValueError as e:
            raise OSRMError(f"OSRM returned a non-JSON body: {e}") from e

        #validating OSRM response
        if data.get("code") != "Ok":
            raise OSRMError(f"OSRM returned error: {data.get('code')} {data.get('message', '')}".strip())
        return data

        #----------------
        # table service (one origin -> many destinations)
        #----------------
    def compute_table_from_origin(self, profile: str, origin: LatLon,
                                  destinations: List[LatLon]
                                  ) -> Dict[str, List[Optional[float]]]:
            """
            calls the OSRM /table endpoint with the origin at coordinate index 0
            followed by every destination, asking only for row 0.

            returns :
            {
                "distances": [float | None, ...], # meters, one per destination
                "durations": [float | None, ...], # seconds, one per destination
            }
            the origin -> origin entry is dropped, so index i is destinations[i].
            """
            if not destinations:
                return {"distances": [], "durations": []}

            coordinates = self.format_coordinates([origin] + list(destinations))
            url = f"{self.base_url}/table/v1/{profile}/{coordinates}"

            data = self._get(url, {
                "sources": "0",
                "annotations": "distance,duration",
            })

            try:
                distances = data["distances"][0][1:] # skip first (origin to origin = 0)
                durations = data["durations"][0][1:]
            except (KeyError, IndexError, TypeError) as e:
                raise OSRMError(f"OSRM table response missing row 0: {e}") from e

            if len(distances) != len(destinations) or len(durations) != len(destinations):
                raise OSRMError(
                    f"OSRM table returned {len(distances)} entries for {len(destinations)} destinations"
                )

            return {
                "distances": distances,
                "durations": durations,
            }
