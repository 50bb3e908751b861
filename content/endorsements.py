"""
Endorsement catalog for the player's campaign.

Requirements are free text; a percentage in it is read as the minimum
player support needed before the endorsement can be pursued.
fundraising_bonus is weekly income in dollars once the endorsement is secured.
"""

from typing import Any, Dict, List

from state import Endorsement

ENDORSEMENT_CATALOG: List[Dict[str, Any]] = [
    {
        'id': 'henderson-chamber',
        'name': 'Henderson Chamber of Commerce',
        'description': 'The largest business group in the district.',
        'demographic_effects': {'suburban-families': 1.5, 'asian-american': 1.0},
        'fundraising_bonus': 5000,
        'requirements': 'None',
        'turns_to_secure': 2,
    },
    {
        'id': 'police-protective',
        'name': 'Las Vegas Police Protective Association',
        'description': 'Metro police union; carries weight on public safety.',
        'demographic_effects': {'suburban-families': 1.0, 'retirees-seniors': 1.5},
        'fundraising_bonus': 0,
        'requirements': 'Requires 40% support',
        'turns_to_secure': 3,
    },
    {
        'id': 'vfw-nevada',
        'name': 'VFW Nevada',
        'description': 'Veterans of Foreign Wars, Department of Nevada.',
        'demographic_effects': {'veterans-military': 3.0, 'retirees-seniors': 0.5},
        'fundraising_bonus': 0,
        'requirements': 'None',
        'turns_to_secure': 2,
    },
    {
        'id': 'nevada-farm-bureau',
        'name': 'Nevada Farm Bureau',
        'description': 'Water and land-use advocates for the rural edge of the district.',
        'demographic_effects': {'rural-conservative': 3.0},
        'fundraising_bonus': 2500,
        'requirements': 'None',
        'turns_to_secure': 1,
    },
    {
        'id': 'latino-business-council',
        'name': 'Latino Business Council of Southern Nevada',
        'description': 'Small-business owners from Spring Valley to East Las Vegas.',
        'demographic_effects': {'latino-hispanic': 2.5, 'hospitality-workers': 0.5},
        'fundraising_bonus': 2500,
        'requirements': 'Requires 40% support',
        'turns_to_secure': 3,
    },
    {
        'id': 'asian-american-alliance',
        'name': 'Asian American Business Alliance',
        'description': 'Chinatown merchants and professionals along Spring Mountain Road.',
        'demographic_effects': {'asian-american': 3.0},
        'fundraising_bonus': 2500,
        'requirements': 'None',
        'turns_to_secure': 2,
    },
    {
        'id': 'gaming-employees',
        'name': 'Independent Gaming Employees Association',
        'description': 'Dealers and floor staff outside the big unions.',
        'demographic_effects': {'hospitality-workers': 2.5},
        'fundraising_bonus': 0,
        'requirements': 'Requires 43% support',
        'turns_to_secure': 3,
    },
    {
        'id': 'seniors-coalition',
        'name': 'Nevada Seniors Coalition',
        'description': 'Retiree advocacy group with a large Sun City membership.',
        'demographic_effects': {'retirees-seniors': 2.5},
        'fundraising_bonus': 0,
        'requirements': 'None',
        'turns_to_secure': 2,
    },
    {
        'id': 'review-journal',
        'name': 'Las Vegas Review-Journal Editorial Board',
        'description': "The state's largest newspaper.",
        'demographic_effects': {'suburban-families': 1.0, 'retirees-seniors': 1.0, 'asian-american': 0.5},
        'fundraising_bonus': 0,
        'requirements': 'Requires 43% support',
        'turns_to_secure': 4,
    },
    {
        'id': 'former-governor',
        'name': 'Former Governor',
        'description': 'A popular ex-governor who still draws a crowd.',
        'demographic_effects': {
            'suburban-families': 1.0, 'latino-hispanic': 1.0, 'veterans-military': 1.0,
            'rural-conservative': 1.0,
        },
        'fundraising_bonus': 7500,
        'requirements': 'Requires 45% support',
        'turns_to_secure': 4,
    },
]


def build_endorsements() -> List[Endorsement]:
    """Fresh, unpursued Endorsement records for a new campaign."""
    return [
        Endorsement(
            id=entry['id'],
            name=entry['name'],
            description=entry['description'],
            demographic_effects=dict(entry['demographic_effects']),
            fundraising_bonus=entry['fundraising_bonus'],
            requirements=entry['requirements'],
            turns_to_secure=entry['turns_to_secure'],
        )
        for entry in ENDORSEMENT_CATALOG
    ]
