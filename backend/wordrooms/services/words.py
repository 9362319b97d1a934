import random
from typing import Final, List

WORD_LIST: Final[List[str]] = [
    'ABOUT', 'ABOVE', 'ACTOR', 'ACUTE', 'ADMIT', 'ADOPT', 'ADULT', 'AFTER',
    'AGAIN', 'AGENT', 'AGREE', 'AHEAD', 'ALARM', 'ALBUM', 'ALERT', 'ALIKE',
    'ALIVE', 'ALLOW', 'ALONE', 'ALONG', 'ANGER', 'ANGLE', 'APPLE', 'APPLY',
    'ARENA', 'ARGUE', 'ARISE', 'ASIDE', 'AVOID', 'AWARD', 'BADGE', 'BASIC',
    'BEACH', 'BEGIN', 'BEING', 'BENCH', 'BIRTH', 'BLACK', 'BLADE', 'BLAME',
    'BLANK', 'BLEND', 'BLIND', 'BLOCK', 'BOARD', 'BRAIN', 'BRAND', 'BREAD',
    'BREAK', 'BRICK', 'BRIEF', 'BRING', 'BROWN', 'BUILD', 'CABIN', 'CANDY',
    'CARRY', 'CATCH', 'CAUSE', 'CHAIN', 'CHAIR', 'CHARM', 'CHART', 'CHEAP',
    'CHECK', 'CHESS', 'CHIEF', 'CHILD', 'CLAIM', 'CLASS', 'CLEAN', 'CLEAR',
    'CLIMB', 'CLOCK', 'CLOSE', 'CLOUD', 'COACH', 'COAST', 'COUNT', 'COURT',
    'COVER', 'CRAFT', 'CRANE', 'CRASH', 'CREAM', 'CROWD', 'CURVE', 'CYCLE',
    'DAILY', 'DANCE', 'DEALT', 'DELAY', 'DEPTH', 'DIARY', 'DOUBT', 'DRAFT',
    'DRAMA', 'DREAM', 'DRESS', 'DRINK', 'DRIVE', 'EAGLE', 'EARLY', 'EARTH',
    'EMPTY', 'ENJOY', 'ENTER', 'EQUAL', 'ERROR', 'EVENT', 'EXACT', 'EXIST',
    'FAITH', 'FALSE', 'FAULT', 'FEAST', 'FIELD', 'FIGHT', 'FINAL', 'FLAME',
    'FLASH', 'FLOOR', 'FOCUS', 'FORCE', 'FRAME', 'FRESH', 'FRONT', 'FRUIT',
    'GHOST', 'GIANT', 'GLASS', 'GRACE', 'GRADE', 'GRAIN', 'GRAND', 'GRANT',
    'GRAPE', 'GRASS', 'GREAT', 'GREEN', 'GROUP', 'GUARD', 'GUESS', 'GUIDE',
    'HAPPY', 'HEART', 'HEAVY', 'HONEY', 'HORSE', 'HOTEL', 'HOUSE', 'HUMAN',
    'IDEAL', 'IMAGE', 'INDEX', 'INNER', 'INPUT', 'JUDGE', 'KNIFE', 'LARGE',
    'LAUGH', 'LAYER', 'LEARN', 'LEMON', 'LEVEL', 'LIGHT', 'LIMIT', 'LUNCH',
    'MAGIC', 'MAJOR', 'MARCH', 'MATCH', 'METAL', 'MIGHT', 'MODEL', 'MONEY',
    'MONTH', 'MOUNT', 'MOUSE', 'MOUTH', 'MUSIC', 'NERVE', 'NIGHT', 'NOISE',
    'NORTH', 'NOVEL', 'NURSE', 'OCEAN', 'OFFER', 'OLIVE', 'ORDER', 'OTHER',
    'PAINT', 'PANEL', 'PAPER', 'PARTY', 'PEACE', 'PHONE', 'PIANO', 'PIECE',
    'PILOT', 'PLACE', 'PLAIN', 'PLANE', 'PLANT', 'PLATE', 'POINT', 'POWER',
    'PRESS', 'PRICE', 'PRIDE', 'PRIME', 'PRIZE', 'PROOF', 'PROUD', 'QUEEN',
    'QUICK', 'QUIET', 'RADIO', 'RAISE', 'RANGE', 'RAPID', 'REACH', 'READY',
    'RIVER', 'ROBOT', 'ROUND', 'ROUTE', 'ROYAL', 'SALAD', 'SCALE', 'SCENE',
    'SCORE', 'SENSE', 'SHAPE', 'SHARE', 'SHARP', 'SHEEP', 'SHELF', 'SHELL',
    'SHIFT', 'SHINE', 'SHIRT', 'SHOCK', 'SHORE', 'SIGHT', 'SKILL', 'SLEEP',
    'SMALL', 'SMART', 'SMILE', 'SMOKE', 'SOLID', 'SOUND', 'SOUTH', 'SPACE',
    'SPARK', 'SPEAK', 'SPEED', 'SPICE', 'SPORT', 'STAFF', 'STAGE', 'STAIR',
    'STAND', 'START', 'STEAM', 'STONE', 'STORM', 'STORY', 'SUGAR', 'SWEET',
    'TABLE', 'TASTE', 'TEACH', 'THEME', 'THINK', 'TIGER', 'TITLE', 'TOAST',
    'TOTAL', 'TOUCH', 'TOWER', 'TRACK', 'TRADE', 'TRAIN', 'TREND', 'TRUST',
    'TRUTH', 'UNCLE', 'UNION', 'UNITY', 'UPPER', 'URBAN', 'VALUE', 'VIDEO',
    'VISIT', 'VOICE', 'WASTE', 'WATCH', 'WATER', 'WHEEL', 'WHITE', 'WHOLE',
    'WOMAN', 'WORLD', 'WORRY', 'WRITE', 'YOUNG', 'YOUTH', 'ZEBRA',
]


def get_random_word() -> str:
    """Return a random target word from the fixed dictionary."""
    return random.choice(WORD_LIST)
