"""
Team Transformer - raw team rows to the team section display model
"""
from typing import List, Dict, Iterable, Mapping
from neonedu.services.ordering import ordered_by


class TeamTransformer:
    """Maps team member rows to team cards in a fixed display order"""

    # Known names, in the order the team section shows them
    TEAM_ORDER = (
        'Dalantai.E',
        'Anar.P',
        'Enkhjin. G',
        'Kherlen. Sh',
        'Mandakhjargal.E',
        'Enkhjin. T',
        'Yumjir. Ts',
    )

    @classmethod
    def to_display(cls, member: Mapping) -> Dict:
        """Map a single row to a team card"""
        return {
            'name': member.get('name') or '',
            'image': member.get('image') or '',
            'position': member.get('role') or '',
            'ditem1': member.get('bio') or '',
            # Reserved for multi-line bios
            'ditem2': '',
            'ditem3': ''
        }

    @classmethod
    def transform(cls, members: Iterable[Mapping]) -> List[Dict]:
        """
        Transform team member rows into ordered team cards

        Args:
            members: Raw rows as returned by the store

        Returns:
            List of {name, image, position, ditem1, ditem2, ditem3}
        """
        cards = [cls.to_display(member) for member in members]
        order = ordered_by(cls.TEAM_ORDER)
        return sorted(cards, key=lambda card: order(card['name']))
