"""Curated emoji catalog used for generated slugs.

Every entry is a single codepoint with default emoji presentation, so one
catalog entry is always exactly one glyph in a slug.
"""

ANIMALS = (
    "🐱🐶🐸🐵🐔🐧🐦🐤🐺🐗🐴🦄🐝🐛🦋🐌🐞🐜🐢🐍🦎🦂🦀🦑🐙🦐🐠🐟🐡🐬"
    "🦈🐳🐋🐊🐆🐅🐃🐂🐄🦌🐪🐫🐘🦏🦍🐎🐖🐐🐏🐑🐕🐩🐈🐓🦃🐇🐁🐀🐉🐲"
    "🦊🦁🐯🐮🐷🐹🐰🐻🐼🐨🦉🦅🦆🦇🦒🦓🦔🦕🦖"
)

NATURE = (
    "🌵🎄🌲🌳🌴🌱🌿🍀🎍🎋🍃🍂🍁🍄🌾💐🌷🌹🥀🌺🌸🌼🌻🌞🌝🌛🌜🌚🌕🌙"
    "🌎🌍🌏💫⭐🌟✨⚡🔥💥🌈🌊⛄"
)

FOOD = (
    "🍏🍎🍐🍊🍋🍌🍉🍇🍓🍈🍒🍑🍍🥝🥑🍅🍆🥒🥕🌽🥔🍠🌰🥜🍯🥐🍞🥖🧀🥚"
    "🍳🥓🥞🍤🍗🍖🍕🌭🍔🍟🥙🌮🌯🥗🥘🍝🍜🍲🍥🍣🍱🍛🍚🍙🍘🍢🍡🍧🍨🍦"
    "🍰🎂🍮🍭🍬🍫🍿🍩🍪🥛🍵🍶🍺🍻🥂🍷🥃🍸🍹🍾☕"
)

ACTIVITIES = (
    "⚽🏀🏈⚾🎾🏐🏉🎱🏓🏸🥅🏒🏑🏏🎯🎳🎮🎲🎸🎺🎷🥁🎻🎹🎤🎧🎨🎭🎪🎬"
)

TRAVEL = (
    "🚗🚕🚙🚌🚎🚓🚑🚒🚐🚚🚛🚜🛴🚲🛵🚨🚔🚍🚘🚖🚡🚠🚟🚃🚋🚞🚝🚄🚅🚈"
    "🚂🚆🚇🚊🚉🚁🛫🛬🚀⛵🚤🚢⚓🚧⛽🚏🚦🚥🗿🗽⛲🗼🏰🏯🎡🎢🎠🗻🌋⛺"
    "🏠🏡🏢🏬🏣🏤🏥🏦🏨🏪🏫🏩💒⛪🕌🕍🕋"
)

OBJECTS = (
    "💎🔮🎁🎈🎉🎊🔔🔑💡🔦📚📌📎💰💣🔭🔬💊🎀🏆🏅👑💍🎩👓👒🌂"
)

EMOJI_CATALOG = tuple(ANIMALS + NATURE + FOOD + ACTIVITIES + TRAVEL + OBJECTS)
