from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Mode:
    name: str
    prompt: str
    voice: str
    button_label: str
    busy_label: str


ROAST_PROMPT = """Concoct a rib-tickling appraisal of an individual's ensemble and aura in their dating profile snapshot.
Delve beyond mere sartorial selections to the stance they've struck, the ambiance they're basking in,
and the cohort or objects they've enlisted as accessories. Marinate the narrative in a savory roast comedy marinade,
seasoned with zesty quips and a dollop of drollery. Celebrate the style misadventures with a nod to their audacious flair,
whether they're surfing the edge of avant-garde or charmingly clashing. Satirize the gym buffs, globe-trotters, and gastronomy
aficionados with whimsical analogies that elevate mundane profile props to comedic fame. In crowd shots, weave in a playful 'whodunnit' jest,
spotlighting the amusing quest to pinpoint the profile's protagonist. Elevate the prose with metaphors and similes that paint the scene as if it's
a sprightly episode of a fashion critique comedy skit. The roast should emit warmth and merriment, crafting a convivial jeer that tickles the funny
bone with tender affection, steering clear of the lane of offense. All while speaking plainly, as if to a friend.
IMPORTANT: Make sure your response is less than 60 words"""

COMPLIMENT_PROMPT = """Craft a warm and genuine compliment for the individual's dating profile picture. Focus on their positive attributes,
style choices, and the overall impression they convey. Highlight their unique features, the setting they've chosen,
and any interesting elements in the photo. Use creative and uplifting language to boost their confidence and showcase
their best qualities. Be specific and sincere, avoiding generic praise. Aim to make the person feel appreciated and
special. Speak as if you're a supportive friend offering heartfelt encouragement.
IMPORTANT: Keep your response under 60 words."""

JUDGING_PROMPT = """Provide a playful and slightly sassy critique of the subject's overall appearance in their photos.

1. Comment on their outfit choice, pointing out the fine line between stylish and questionable fashion decisions. Offer a light-hearted suggestion for improvement.

2. Evaluate their pose, highlighting areas where they might look awkward or overly stiff. Suggest ways they could appear more relaxed and confident.

3. Critique the background of the photos, noting if it seems cluttered or distracting. Offer advice on choosing a more flattering or tidy setting.

Ensure the critique is a mix of playful judgment and advice, delivered with a humorous, slightly sarcastic tone that encourages users to laugh at themselves while taking the advice to heart.
IMPORTANT: Limit your response to 60 words or less."""

DEFAULT_VOICE = "shimmer"

MODES: Dict[str, Mode] = {
    "roast": Mode("roast", ROAST_PROMPT, DEFAULT_VOICE, "Roast Me", "Generating Roast..."),
    "compliment": Mode("compliment", COMPLIMENT_PROMPT, DEFAULT_VOICE, "Compliment Me", "Generating Compliment..."),
    "judging": Mode("judging", JUDGING_PROMPT, DEFAULT_VOICE, "Judge Me", "Generating judges..."),
}


def get_mode(name: Optional[str]) -> Optional[Mode]:
    return MODES.get(name) if isinstance(name, str) else None


def allowed_modes_message() -> str:
    names = [f"'{name}'" for name in MODES]
    return f"Invalid mode. Use {', '.join(names[:-1])}, or {names[-1]}"
