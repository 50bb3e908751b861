"""
Nevada's 3rd Congressional District.

Seven voter segments whose electorate shares sum to 100. Lean runs from
-100 (solid Democrat) to +100 (solid Republican).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from balance import GAME_CONSTANTS


@dataclass
class DemographicProfile:
    """Static description of one voter segment."""

    id: str
    name: str
    electorate_pct: float
    base_lean: float
    persuadability: float
    key_issues: List[str] = field(default_factory=list)


DISTRICT: Dict[str, Any] = {
    'id': 'nv-03',
    'name': "Nevada's 3rd Congressional District",
    'state': 'NV',
    'population': GAME_CONSTANTS['DISTRICT_POPULATION'],
    'cook_pvi': 'D+1',
    'player_candidate': 'Steve Gonzalez',
    'description': (
        'Southern Clark County: Henderson, Summerlin South, Enterprise and '
        'the suburbs ringing the Las Vegas Strip.'
    ),
}

DEMOGRAPHICS: List[DemographicProfile] = [
    DemographicProfile(
        id='suburban-families',
        name='Suburban Families',
        electorate_pct=24,
        base_lean=5,
        persuadability=0.5,
        key_issues=['education', 'cost-of-living', 'public-safety'],
    ),
    DemographicProfile(
        id='latino-hispanic',
        name='Latino/Hispanic Voters',
        electorate_pct=18,
        base_lean=-15,
        persuadability=0.6,
        key_issues=['economy', 'immigration', 'healthcare'],
    ),
    DemographicProfile(
        id='hospitality-workers',
        name='Hospitality Workers',
        electorate_pct=16,
        base_lean=-20,
        persuadability=0.55,
        key_issues=['wages', 'tourism', 'healthcare'],
    ),
    DemographicProfile(
        id='retirees-seniors',
        name='Retirees & Seniors',
        electorate_pct=15,
        base_lean=10,
        persuadability=0.35,
        key_issues=['social-security', 'healthcare', 'public-safety'],
    ),
    DemographicProfile(
        id='asian-american',
        name='Asian American Voters',
        electorate_pct=10,
        base_lean=-5,
        persuadability=0.5,
        key_issues=['small-business', 'education', 'economy'],
    ),
    DemographicProfile(
        id='veterans-military',
        name='Veterans & Military Families',
        electorate_pct=9,
        base_lean=20,
        persuadability=0.4,
        key_issues=['veterans-affairs', 'national-security', 'economy'],
    ),
    DemographicProfile(
        id='rural-conservative',
        name='Rural & Exurban Conservatives',
        electorate_pct=8,
        base_lean=35,
        persuadability=0.25,
        key_issues=['water-rights', 'land-use', 'taxes'],
    ),
]

CAMPAIGN_LOCATIONS = ['Summerlin', 'Spring Valley', 'Enterprise', 'Henderson']
