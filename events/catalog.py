"""
Static event catalog, one table per category.

Entries are plain dicts so they read like the content files they stand in
for; ALL_EVENTS holds the parsed GameEvent objects.
"""

from typing import Any, Dict, List, Optional

from .models import EventCategory, GameEvent


# =============================================================================
# NATIONAL
# =============================================================================

NATIONAL_EVENTS: List[Dict[str, Any]] = [
    {
        'id': 'national-gas-price-spike',
        'category': 'national',
        'title': 'Gas Prices Spike',
        'description': 'A refinery outage sends gas past $6 a gallon across the valley.',
        'severity': 'moderate',
        'phase_range': ['primary', 'final'],
        'probability': 0.15,
        'one_time': True,
        'choices': [
            {
                'id': 'blame-washington',
                'text': 'Blame Washington for the energy mess',
                'effects': [
                    {'type': 'demographic_change', 'value': 2, 'demographic': 'rural-conservative',
                     'description': 'Rural voters cheer the message'},
                    {'type': 'demographic_change', 'value': -1, 'demographic': 'suburban-families',
                     'description': 'Suburban parents find it too partisan'},
                ],
            },
            {
                'id': 'relief-plan',
                'text': 'Roll out a gas-tax holiday proposal',
                'effects': [
                    {'type': 'poll_change', 'value': 1, 'description': 'Voters like the relief plan'},
                    {'type': 'cash_change', 'value': -10000, 'description': 'Policy rollout costs'},
                ],
            },
        ],
    },
    {
        'id': 'national-jobs-report',
        'category': 'national',
        'title': 'Strong Jobs Report',
        'description': 'Hospitality hiring rebounds nationally and Las Vegas leads the surge.',
        'severity': 'minor',
        'phase_range': ['early', 'final'],
        'probability': 0.2,
        'one_time': True,
        'choices': [
            {
                'id': 'credit-workers',
                'text': 'Credit the workers who rebuilt the Strip',
                'effects': [
                    {'type': 'demographic_change', 'value': 2, 'demographic': 'hospitality-workers',
                     'description': 'Hospitality workers appreciate the nod'},
                    {'type': 'momentum_change', 'value': 0.5, 'description': 'Good news cycle'},
                ],
            },
            {
                'id': 'stay-quiet',
                'text': 'Stay on your own message',
                'effects': [],
            },
        ],
    },
    {
        'id': 'national-supreme-court-ruling',
        'category': 'national',
        'title': 'Landmark Court Ruling',
        'description': 'A divisive Supreme Court decision dominates cable news for a week.',
        'severity': 'major',
        'phase_range': ['mid', 'final'],
        'probability': 0.12,
        'one_time': True,
        'choices': [
            {
                'id': 'take-a-stand',
                'text': 'Take a clear public stand',
                'effects': [
                    {'type': 'momentum_change', 'value': 1, 'description': 'Base energized'},
                    {'type': 'email_list_change', 'value': 1500, 'description': 'Sign-ups surge'},
                ],
                'risk': {
                    'probability': 0.35,
                    'description': 'Moderates may recoil',
                    'bad_outcome': [
                        {'type': 'demographic_change', 'value': -2, 'demographic': 'retirees-seniors',
                         'description': 'Seniors recoil from the stance'},
                    ],
                },
            },
            {
                'id': 'pivot-to-economy',
                'text': 'Pivot back to cost of living',
                'effects': [
                    {'type': 'poll_change', 'value': 0.5, 'description': 'Steady, disciplined message'},
                ],
            },
        ],
    },
    {
        'id': 'national-wave-poll',
        'category': 'national',
        'title': 'National Environment Shifts',
        'description': 'Generic-ballot polling swings toward your party.',
        'severity': 'minor',
        'phase_range': ['primary', 'final'],
        'probability': 0.1,
        'one_time': False,
        'choices': [
            {
                'id': 'ride-the-wave',
                'text': 'Nationalize the race',
                'effects': [
                    {'type': 'poll_change', 'value': 1, 'description': 'Rising tide lifts your numbers'},
                    {'type': 'opponent_change', 'value': -0.5, 'description': 'Opponent feels the headwind'},
                ],
            },
        ],
    },
    {
        'id': 'national-shutdown-threat',
        'category': 'national',
        'title': 'Government Shutdown Looms',
        'description': 'Nellis and Creech families brace for missed paychecks.',
        'severity': 'major',
        'phase_range': ['early', 'mid'],
        'probability': 0.12,
        'one_time': True,
        'choices': [
            {
                'id': 'pay-the-troops',
                'text': 'Demand Congress pay the troops first',
                'effects': [
                    {'type': 'demographic_change', 'value': 3, 'demographic': 'veterans-military',
                     'description': 'Military families rally behind you'},
                ],
            },
            {
                'id': 'blame-both-sides',
                'text': 'Blame both parties for the dysfunction',
                'effects': [
                    {'type': 'poll_change', 'value': 0.5, 'description': 'Independents nod along'},
                    {'type': 'momentum_change', 'value': -0.5, 'description': 'Your base wanted a fight'},
                ],
            },
        ],
    },
]


# =============================================================================
# LOCAL
# =============================================================================

LOCAL_EVENTS: List[Dict[str, Any]] = [
    {
        'id': 'local-lake-mead-record-low',
        'category': 'local',
        'title': 'Lake Mead Hits Record Low',
        'description': 'New intake valves are exposed; water restrictions are on the table.',
        'severity': 'major',
        'phase_range': ['primary', 'mid'],
        'probability': 0.2,
        'one_time': True,
        'choices': [
            {
                'id': 'water-plan',
                'text': 'Release a detailed drought plan',
                'effects': [
                    {'type': 'demographic_change', 'value': 2, 'demographic': 'suburban-families',
                     'description': 'Henderson families like the plan'},
                    {'type': 'demographic_change', 'value': 1.5, 'demographic': 'retirees-seniors',
                     'description': 'Summerlin retirees take note'},
                    {'type': 'cash_change', 'value': -15000, 'description': 'Policy team overtime'},
                ],
            },
            {
                'id': 'tour-the-dam',
                'text': 'Hold a press conference at Hoover Dam',
                'effects': [
                    {'type': 'momentum_change', 'value': 1, 'description': 'Striking visuals'},
                ],
                'risk': {
                    'probability': 0.25,
                    'description': 'Critics call it a photo op',
                    'bad_outcome': [
                        {'type': 'poll_change', 'value': -1, 'description': 'Photo-op backlash'},
                    ],
                },
            },
        ],
    },
    {
        'id': 'local-rent-hike',
        'category': 'local',
        'title': 'Rents Jump 12%',
        'description': 'A new report shows Clark County rents rising faster than anywhere in the West.',
        'severity': 'moderate',
        'phase_range': ['early', 'final'],
        'probability': 0.2,
        'one_time': True,
        'choices': [
            {
                'id': 'renters-town-hall',
                'text': "Host a renters' town hall in Spring Valley",
                'effects': [
                    {'type': 'demographic_change', 'value': 2, 'demographic': 'hospitality-workers',
                     'description': 'Workers feel heard'},
                    {'type': 'demographic_change', 'value': 1.5, 'demographic': 'latino-hispanic',
                     'description': 'Latino families show up in numbers'},
                ],
            },
            {
                'id': 'builder-friendly',
                'text': 'Call for cutting red tape on new construction',
                'effects': [
                    {'type': 'cash_change', 'value': 25000, 'description': 'Developers open their wallets'},
                    {'type': 'demographic_change', 'value': -1, 'demographic': 'hospitality-workers',
                     'description': 'Renters feel ignored'},
                ],
            },
        ],
    },
    {
        'id': 'local-heat-wave',
        'category': 'local',
        'title': 'Deadly Heat Wave',
        'description': 'Temperatures hit 118 degrees and cooling centers overflow.',
        'severity': 'crisis',
        'phase_range': ['primary', 'early'],
        'probability': 0.15,
        'one_time': True,
        'choices': [
            {
                'id': 'volunteer-drive',
                'text': 'Turn field offices into cooling stations',
                'effects': [
                    {'type': 'poll_change', 'value': 1, 'description': 'Community praises the effort'},
                    {'type': 'cash_change', 'value': -8000, 'description': 'Water and fans'},
                    {'type': 'gotv_change', 'value': 5000, 'description': 'Volunteers join your field operation'},
                ],
            },
            {
                'id': 'press-release',
                'text': 'Issue a statement of support',
                'effects': [],
            },
        ],
    },
    {
        'id': 'local-casino-strike',
        'category': 'local',
        'title': 'Culinary Workers Threaten Strike',
        'description': 'Contract talks collapse at three Strip properties.',
        'severity': 'major',
        'phase_range': ['early', 'final'],
        'probability': 0.15,
        'one_time': True,
        'choices': [
            {
                'id': 'join-picket',
                'text': 'Walk the picket line',
                'effects': [
                    {'type': 'demographic_change', 'value': 3, 'demographic': 'hospitality-workers',
                     'description': 'The union notices'},
                ],
                'risk': {
                    'probability': 0.3,
                    'description': 'Business community pushes back',
                    'bad_outcome': [
                        {'type': 'cash_change', 'value': -20000, 'description': 'Donors pull back'},
                    ],
                },
            },
            {
                'id': 'call-for-mediation',
                'text': 'Call for federal mediation',
                'effects': [
                    {'type': 'poll_change', 'value': 0.5, 'description': 'Seen as a problem solver'},
                ],
            },
        ],
    },
    {
        'id': 'local-school-overcrowding',
        'category': 'local',
        'title': 'Portables Pile Up at Schools',
        'description': 'Enterprise elementary schools are running at 140% capacity.',
        'severity': 'minor',
        'phase_range': ['primary', 'final'],
        'probability': 0.15,
        'one_time': False,
        'choices': [
            {
                'id': 'school-visit',
                'text': 'Visit a school with local parents',
                'effects': [
                    {'type': 'demographic_change', 'value': 1.5, 'demographic': 'suburban-families',
                     'description': 'Parents appreciate the visit'},
                    {'type': 'demographic_change', 'value': 1, 'demographic': 'asian-american',
                     'description': 'Education-focused voters engage'},
                ],
            },
        ],
    },
]


# =============================================================================
# CAMPAIGN
# =============================================================================

CAMPAIGN_EVENTS: List[Dict[str, Any]] = [
    {
        'id': 'campaign-viral-video',
        'category': 'campaign',
        'title': 'Your Video Goes Viral',
        'description': 'A clip of you fixing a neighbor\'s swamp cooler racks up two million views.',
        'severity': 'minor',
        'phase_range': ['primary', 'final'],
        'probability': 0.15,
        'one_time': True,
        'choices': [
            {
                'id': 'fundraising-email',
                'text': 'Turn it into a fundraising email',
                'effects': [
                    {'type': 'cash_change', 'value': 30000, 'description': 'Small-dollar flood'},
                    {'type': 'email_list_change', 'value': 3000, 'description': 'List grows overnight'},
                ],
            },
            {
                'id': 'stay-humble',
                'text': 'Let it speak for itself',
                'effects': [
                    {'type': 'momentum_change', 'value': 1.5, 'description': 'Authenticity points'},
                ],
            },
        ],
    },
    {
        'id': 'campaign-staffer-gaffe',
        'category': 'campaign',
        'title': 'Staffer Gaffe',
        'description': 'A junior staffer\'s old posts resurface and reporters are calling.',
        'severity': 'moderate',
        'phase_range': ['early', 'final'],
        'probability': 0.15,
        'one_time': True,
        'choices': [
            {
                'id': 'fire-staffer',
                'text': 'Let the staffer go immediately',
                'effects': [
                    {'type': 'momentum_change', 'value': -0.5, 'description': 'Story dies quickly'},
                ],
            },
            {
                'id': 'defend-staffer',
                'text': 'Stand by your team',
                'effects': [],
                'risk': {
                    'probability': 0.5,
                    'description': 'The story could grow legs',
                    'bad_outcome': [
                        {'type': 'poll_change', 'value': -1.5, 'description': 'Story dominates the news cycle'},
                        {'type': 'momentum_change', 'value': -1.5, 'description': 'Campaign on defense'},
                    ],
                },
            },
        ],
    },
    {
        'id': 'campaign-volunteer-surge',
        'category': 'campaign',
        'title': 'Volunteer Surge',
        'description': 'Three hundred new volunteers sign up after your weekend rally.',
        'severity': 'minor',
        'phase_range': ['mid', 'final'],
        'probability': 0.2,
        'one_time': True,
        'prerequisites': [{'type': 'momentum_above', 'value': 2}],
        'choices': [
            {
                'id': 'canvass',
                'text': 'Put them on doors',
                'effects': [
                    {'type': 'gotv_change', 'value': 15000, 'description': 'Field program expands'},
                ],
            },
            {
                'id': 'phone-bank',
                'text': 'Put them on phones for donors',
                'effects': [
                    {'type': 'cash_change', 'value': 20000, 'description': 'Call time pays off'},
                ],
            },
        ],
    },
    {
        'id': 'campaign-cash-crunch',
        'category': 'campaign',
        'title': 'Cash Crunch',
        'description': 'Your finance team warns payroll is at risk.',
        'severity': 'major',
        'phase_range': ['early', 'final'],
        'probability': 0.35,
        'one_time': True,
        'prerequisites': [{'type': 'cash_below', 'value': 50000}],
        'choices': [
            {
                'id': 'emergency-appeal',
                'text': 'Send an emergency appeal',
                'effects': [
                    {'type': 'cash_change', 'value': 35000, 'description': 'Supporters answer the call'},
                    {'type': 'momentum_change', 'value': -0.5, 'description': 'Desperation shows'},
                ],
            },
            {
                'id': 'self-fund',
                'text': 'Loan the campaign your own money',
                'effects': [
                    {'type': 'cash_change', 'value': 50000, 'description': 'Personal loan'},
                ],
            },
        ],
    },
    {
        'id': 'campaign-internal-poll-leak',
        'category': 'campaign',
        'title': 'Internal Poll Leaks',
        'description': 'Your pollster\'s numbers showing a tight race end up in the Review-Journal.',
        'severity': 'minor',
        'phase_range': ['mid', 'final'],
        'probability': 0.25,
        'one_time': True,
        'prerequisites': [{'type': 'has_staff', 'value': 'pollster'}],
        'choices': [
            {
                'id': 'embrace-it',
                'text': 'Embrace it: "we can win this"',
                'effects': [
                    {'type': 'momentum_change', 'value': 1, 'description': 'Donors smell a winner'},
                    {'type': 'cash_change', 'value': 15000, 'description': 'Late money arrives'},
                ],
            },
        ],
    },
    {
        'id': 'campaign-frontrunner-scrutiny',
        'category': 'campaign',
        'title': 'Frontrunner Scrutiny',
        'description': 'With you ahead, national reporters start digging.',
        'severity': 'moderate',
        'phase_range': ['mid', 'final'],
        'probability': 0.3,
        'one_time': True,
        'prerequisites': [{'type': 'poll_above', 'value': 48}],
        'choices': [
            {
                'id': 'open-book',
                'text': 'Release your tax returns proactively',
                'effects': [
                    {'type': 'poll_change', 'value': 0.5, 'description': 'Transparency praised'},
                    {'type': 'staff_unlock', 'value': 1, 'description': 'Seasoned staffer offers to join'},
                ],
            },
            {
                'id': 'stonewall',
                'text': 'Decline interviews',
                'effects': [],
                'risk': {
                    'probability': 0.4,
                    'description': 'Silence invites speculation',
                    'bad_outcome': [
                        {'type': 'poll_change', 'value': -1, 'description': 'Voters wonder what you are hiding'},
                    ],
                },
            },
        ],
    },
]


# =============================================================================
# OPPONENT
# =============================================================================

OPPONENT_EVENTS: List[Dict[str, Any]] = [
    {
        'id': 'opponent-stock-trades',
        'category': 'opponent',
        'title': "Opponent's Stock Trades Questioned",
        'description': 'A watchdog report flags late disclosures of stock trades.',
        'severity': 'major',
        'phase_range': ['early', 'final'],
        'probability': 0.15,
        'one_time': True,
        'choices': [
            {
                'id': 'hammer-it',
                'text': 'Hammer it in every interview',
                'effects': [
                    {'type': 'opponent_change', 'value': -2, 'description': 'Opponent takes a hit'},
                ],
                'risk': {
                    'probability': 0.3,
                    'description': 'Voters may tire of negativity',
                    'bad_outcome': [
                        {'type': 'momentum_change', 'value': -1, 'description': 'Seen as piling on'},
                    ],
                },
            },
            {
                'id': 'ban-trading-bill',
                'text': 'Propose a congressional stock-trading ban',
                'effects': [
                    {'type': 'opponent_change', 'value': -1, 'description': 'Contrast drawn'},
                    {'type': 'poll_change', 'value': 0.5, 'description': 'Reform message lands'},
                ],
            },
        ],
    },
    {
        'id': 'opponent-attack-ad-blitz',
        'category': 'opponent',
        'title': 'Attack Ad Blitz',
        'description': 'The opponent drops $400K on ads questioning your record.',
        'severity': 'major',
        'phase_range': ['mid', 'final'],
        'probability': 0.2,
        'one_time': False,
        'choices': [
            {
                'id': 'respond-in-kind',
                'text': 'Respond with your own contrast ad',
                'effects': [
                    {'type': 'cash_change', 'value': -30000, 'description': 'Rapid-response buy'},
                    {'type': 'opponent_change', 'value': -1, 'description': 'Voters see both sides'},
                ],
            },
            {
                'id': 'take-the-hit',
                'text': 'Ignore it and stay positive',
                'effects': [
                    {'type': 'poll_change', 'value': -1, 'description': 'Attack goes unanswered'},
                ],
            },
        ],
    },
    {
        'id': 'opponent-town-hall-heckled',
        'category': 'opponent',
        'title': 'Opponent Heckled at Town Hall',
        'description': 'Video of a testy exchange with a veteran goes around Facebook.',
        'severity': 'minor',
        'phase_range': ['primary', 'final'],
        'probability': 0.12,
        'one_time': True,
        'choices': [
            {
                'id': 'share-clip',
                'text': 'Share the clip',
                'effects': [
                    {'type': 'demographic_change', 'value': 2, 'demographic': 'veterans-military',
                     'description': 'Veterans take notice'},
                    {'type': 'opponent_change', 'value': -0.5, 'description': 'Opponent embarrassed'},
                ],
            },
            {
                'id': 'take-high-road',
                'text': 'Take the high road',
                'effects': [
                    {'type': 'momentum_change', 'value': 0.5, 'description': 'Graceful response noted'},
                ],
            },
        ],
    },
    {
        'id': 'opponent-big-endorsement',
        'category': 'opponent',
        'title': 'Opponent Lands Big Endorsement',
        'description': 'A popular former governor cuts an ad for your opponent.',
        'severity': 'moderate',
        'phase_range': ['mid', 'final'],
        'probability': 0.15,
        'one_time': True,
        'prerequisites': [{'type': 'poll_above', 'value': 45}],
        'choices': [
            {
                'id': 'counter-programming',
                'text': 'Roll out your own validators',
                'effects': [
                    {'type': 'cash_change', 'value': -10000, 'description': 'Event costs'},
                    {'type': 'opponent_change', 'value': 0.5, 'description': 'Blunted the impact'},
                ],
            },
            {
                'id': 'shrug',
                'text': 'Shrug it off',
                'effects': [
                    {'type': 'opponent_change', 'value': 1.5, 'description': 'Opponent gains ground'},
                ],
            },
        ],
    },
]


# =============================================================================
# DEBATES
# Scheduled: turn_range pins each one to an exact turn.
# =============================================================================

def _debate(number: int, turn: int, phase: str, title: str, description: str) -> Dict[str, Any]:
    return {
        'id': f'debate-{number}',
        'category': 'debate',
        'title': title,
        'description': description,
        'severity': 'major',
        'phase_range': [phase, phase],
        'turn_range': [turn, turn],
        'probability': 1.0,
        'one_time': True,
        'choices': [
            {
                'id': 'go-on-offense',
                'text': "Go on offense against the opponent's record",
                'effects': [
                    {'type': 'opponent_change', 'value': -1.5, 'description': 'Opponent rattled on stage'},
                    {'type': 'momentum_change', 'value': 1, 'description': 'Clips go viral'},
                ],
                'risk': {
                    'probability': 0.35,
                    'description': 'Aggression can backfire',
                    'bad_outcome': [
                        {'type': 'poll_change', 'value': -1.5, 'description': 'Viewers found you too harsh'},
                    ],
                },
            },
            {
                'id': 'stick-to-issues',
                'text': 'Stick to water, housing and the economy',
                'effects': [
                    {'type': 'poll_change', 'value': 1, 'description': 'Solid, steady performance'},
                ],
            },
            {
                'id': 'play-it-safe',
                'text': 'Avoid mistakes and run out the clock',
                'effects': [
                    {'type': 'momentum_change', 'value': -0.5, 'description': 'Forgettable night'},
                ],
            },
        ],
    }


DEBATE_EVENTS: List[Dict[str, Any]] = [
    _debate(1, 10, 'early', 'First Debate: KLAS Studios',
            'A local TV debate that few watch live but many see in clips.'),
    _debate(2, 17, 'mid', 'Second Debate: UNLV',
            'The marquee debate, streamed statewide.'),
    _debate(3, 23, 'final', 'Final Debate: Henderson Pavilion',
            'One last chance to reach undecided voters before early voting.'),
]


EVENT_TABLES: Dict[EventCategory, List[Dict[str, Any]]] = {
    EventCategory.NATIONAL: NATIONAL_EVENTS,
    EventCategory.LOCAL: LOCAL_EVENTS,
    EventCategory.CAMPAIGN: CAMPAIGN_EVENTS,
    EventCategory.OPPONENT: OPPONENT_EVENTS,
    EventCategory.DEBATE: DEBATE_EVENTS,
}

ALL_EVENTS: List[GameEvent] = [
    GameEvent.from_dict(entry)
    for table in EVENT_TABLES.values()
    for entry in table
]


def get_event(event_id: str) -> Optional[GameEvent]:
    for event in ALL_EVENTS:
        if event.id == event_id:
            return event
    return None


def list_events(category: Optional[EventCategory] = None) -> List[GameEvent]:
    if category is None:
        return list(ALL_EVENTS)
    return [e for e in ALL_EVENTS if e.category == category]
