"""
Narration templates for the campaign simulation.

Jinja2-based templates for notification text, the opponent's weekly
log and the plain-text turn briefing. Narration is flavor only: it reads
numbers the engine has already computed and never feeds back into them.
"""

import logging
from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateNotFound

logger = logging.getLogger(__name__)


class NarrationEngine:
    """
    Jinja2-based narration engine.

    Renders the built-in templates, or a caller-supplied set keyed the
    same way.
    """

    def __init__(self, templates: Optional[Dict[str, str]] = None):
        self.templates = dict(DEFAULT_TEMPLATES)
        if templates:
            self.templates.update(templates)

        self.env = Environment(
            loader=DictLoader(self.templates),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

        # Register custom filters
        self.env.filters['currency'] = self._format_currency
        self.env.filters['thousands'] = self._format_thousands
        self.env.filters['percent'] = self._format_percent
        self.env.filters['signed'] = self._format_signed

    def _format_currency(self, value) -> str:
        """Format number as currency."""
        try:
            return f"${int(float(value)):,}"
        except (ValueError, TypeError):
            return f"${value}"

    def _format_thousands(self, value) -> str:
        """Format money as rounded thousands, e.g. $45K."""
        try:
            return f"${round(float(value) / 1000)}K"
        except (ValueError, TypeError):
            return f"${value}"

    def _format_percent(self, value) -> str:
        """Format number as percentage."""
        try:
            return f"{float(value):.1f}%"
        except (ValueError, TypeError):
            return f"{value}%"

    def _format_signed(self, value) -> str:
        try:
            return f"{float(value):+.1f}"
        except (ValueError, TypeError):
            return str(value)

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context; surrounding whitespace is stripped."""
        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound:
            logger.warning("Narration template %r not found", template_name)
            return f"[Template '{template_name}' not found]"
        return template.render(**context).strip()


# =============================================================================
# BUILT-IN TEMPLATES
# =============================================================================

DEFAULT_TEMPLATES = {
    # Notifications
    'notifications/endorsement_secured.txt': '''
{{ name }} has endorsed {{ candidate }}.
''',

    'notifications/endorsement_progress.txt': '''
{{ name }} is warming up: {{ turns_pursued }} of {{ turns_to_secure }} weeks of outreach done.
''',

    'notifications/phase_change.txt': '''
Entering the {{ phase }} phase.
{% if phase == 'final' %}
Early voting is close. Every week counts now.
{% elif phase == 'election' %}
The polls are closed. Time to count the votes.
{% endif %}
''',

    'notifications/gotv_unlocked.txt': '''
Get-out-the-vote operations are now available. Investment builds turnout for election day.
''',

    'notifications/low_cash.txt': '''
Cash on hand ({{ cash | currency }}) will not cover next week's burn of {{ burn | currency }}.
''',

    'notifications/backlash.txt': '''
Your attack ads backfired with {{ count }} voter group{{ 's' if count != 1 else '' }}.
''',

    'notifications/attack_mode.txt': '''
{{ opponent }} has gone negative. Expect attack ads until you give up the lead.
''',

    # Opponent log
    'opponent/fundraising.txt': '''
{{ opponent }} raised {{ amount | thousands }} this week
''',

    'opponent/ads.txt': '''
{% if strategy == 'aggressive' %}
{{ opponent }} increased ad spending with attack ads
{% elif strategy == 'defensive' %}
{{ opponent }} is running positive constituent service ads
{% else %}
{{ opponent }} is running standard campaign ads
{% endif %}
''',

    'opponent/campaign.txt': '''
{{ opponent }} campaigned in {{ location }}
''',

    'opponent/attack_mode.txt': '''
{% if active %}
{{ opponent }}'s campaign has shifted to attack mode
{% else %}
{{ opponent }} has returned to a positive campaign strategy
{% endif %}
''',

    'opponent/gotv.txt': '''
{{ opponent }} invested {{ amount | thousands }} in GOTV operations
''',

    'opponent/endorsement.txt': '''
{{ opponent }} secured endorsement from {{ organization }}
''',

    # Briefing
    'briefing/turn.txt': '''
WEEK {{ turn }} ({{ date }}) - {{ phase | upper }}
Polls: {{ player_support | percent }} vs {{ opponent_support | percent }} ({{ undecided | percent }} undecided, ±{{ margin_of_error }})
Momentum: {{ momentum_label }} ({{ momentum_change | signed }})
Money: raised {{ income | currency }}, spent {{ expenses | currency }}, net {{ net | currency }}
{% if poll_changes %}
Movement:
{% for change in poll_changes %}
  - {{ change.demographic }}: {{ change.player_change | signed }} ({{ change.reason }})
{% endfor %}
{% endif %}
{% if opponent_actions %}
Opponent:
{% for line in opponent_actions %}
  - {{ line }}
{% endfor %}
{% endif %}
{% if notifications %}
Notes:
{% for note in notifications %}
  [{{ note.level | upper }}] {{ note.title }}: {{ note.message }}
{% endfor %}
{% endif %}
{% if events %}
Coming up:
{% for event in events %}
  * {{ event.title }}
{% endfor %}
{% endif %}
''',
}


# Global narration engine instance
_engine: Optional[NarrationEngine] = None


def get_narration_engine() -> NarrationEngine:
    """Get or create the global narration engine."""
    global _engine
    if _engine is None:
        _engine = NarrationEngine()
    return _engine


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    """Convenience function to render a template."""
    return get_narration_engine().render(template_name, context)
