"""Source name to bias rating table.

Compiled from AllSides Media Bias Ratings, the Ad Fontes Media Bias Chart and
Pew Research Center studies. Keys are lowercase and trimmed. Declaration order
matters: the substring fallback in ``classify_bias`` returns the first
qualifying key.
"""

from types import MappingProxyType

from newsintel.data import BiasRating

BIAS_TABLE = MappingProxyType(
    {
        # Left
        "msnbc": BiasRating.LEFT,
        "huffpost": BiasRating.LEFT,
        "huffington post": BiasRating.LEFT,
        "the huffington post": BiasRating.LEFT,
        "motherjones": BiasRating.LEFT,
        "mother jones": BiasRating.LEFT,
        "jacobin": BiasRating.LEFT,
        "the nation": BiasRating.LEFT,
        "democracy now": BiasRating.LEFT,
        "alternet": BiasRating.LEFT,
        "thinkprogress": BiasRating.LEFT,

        # Center-Left
        "cnn": BiasRating.CENTER_LEFT,
        "the new york times": BiasRating.CENTER_LEFT,
        "nytimes": BiasRating.CENTER_LEFT,
        "new york times": BiasRating.CENTER_LEFT,
        "the washington post": BiasRating.CENTER_LEFT,
        "washington post": BiasRating.CENTER_LEFT,
        "npr": BiasRating.CENTER_LEFT,
        "the guardian": BiasRating.CENTER_LEFT,
        "politico": BiasRating.CENTER_LEFT,
        "slate": BiasRating.CENTER_LEFT,
        "vox": BiasRating.CENTER_LEFT,
        "the atlantic": BiasRating.CENTER_LEFT,
        "nbc news": BiasRating.CENTER_LEFT,
        "abc news": BiasRating.CENTER_LEFT,
        "cbs news": BiasRating.CENTER_LEFT,
        "time": BiasRating.CENTER_LEFT,
        "newsweek": BiasRating.CENTER_LEFT,

        # Center
        "reuters": BiasRating.CENTER,
        "associated press": BiasRating.CENTER,
        "ap news": BiasRating.CENTER,
        "bbc": BiasRating.CENTER,
        "bbc news": BiasRating.CENTER,
        "the hill": BiasRating.CENTER,
        "axios": BiasRating.CENTER,
        "bloomberg": BiasRating.CENTER,
        "marketwatch": BiasRating.CENTER,
        "the economist": BiasRating.CENTER,
        "usa today": BiasRating.CENTER,
        "pbs": BiasRating.CENTER,
        "c-span": BiasRating.CENTER,
        "the independent": BiasRating.CENTER,
        "financial times": BiasRating.CENTER,

        # Center-Right
        "the wall street journal": BiasRating.CENTER_RIGHT,
        "wall street journal": BiasRating.CENTER_RIGHT,
        "wsj": BiasRating.CENTER_RIGHT,
        "forbes": BiasRating.CENTER_RIGHT,
        "the washington times": BiasRating.CENTER_RIGHT,
        "washington times": BiasRating.CENTER_RIGHT,
        "reason": BiasRating.CENTER_RIGHT,
        "the dispatch": BiasRating.CENTER_RIGHT,
        "national review": BiasRating.CENTER_RIGHT,
        "the bulwark": BiasRating.CENTER_RIGHT,

        # Right
        "fox news": BiasRating.RIGHT,
        "breitbart": BiasRating.RIGHT,
        "the daily caller": BiasRating.RIGHT,
        "daily caller": BiasRating.RIGHT,
        "the federalist": BiasRating.RIGHT,
        "townhall": BiasRating.RIGHT,
        "newsmax": BiasRating.RIGHT,
        "oann": BiasRating.RIGHT,
        "the blaze": BiasRating.RIGHT,
        "red state": BiasRating.RIGHT,
        "gateway pundit": BiasRating.RIGHT,
        "the american conservative": BiasRating.RIGHT,

        # Tech/General (mostly center)
        "techcrunch": BiasRating.CENTER,
        "the verge": BiasRating.CENTER,
        "wired": BiasRating.CENTER,
        "ars technica": BiasRating.CENTER,
        "engadget": BiasRating.CENTER,
        "cnet": BiasRating.CENTER,
        "gizmodo": BiasRating.CENTER_LEFT,
        "mashable": BiasRating.CENTER_LEFT,
        "zdnet": BiasRating.CENTER,
        "venturebeat": BiasRating.CENTER,
        "recode": BiasRating.CENTER_LEFT,
        "polygon": BiasRating.CENTER_LEFT,
        "kotaku": BiasRating.CENTER_LEFT,

        # International
        "al jazeera": BiasRating.CENTER_LEFT,
        "al jazeera english": BiasRating.CENTER_LEFT,
        "deutsche welle": BiasRating.CENTER,
        "dw": BiasRating.CENTER,
        "france 24": BiasRating.CENTER,
        "rt": BiasRating.RIGHT,  # State-controlled, often aligns with right-wing narratives in West
        "sputnik": BiasRating.RIGHT,
        "xinhua": BiasRating.CENTER,  # State-controlled
        "scmp": BiasRating.CENTER,
        "south china morning post": BiasRating.CENTER,
        "times of israel": BiasRating.CENTER,
        "jerusalem post": BiasRating.CENTER_RIGHT,
        "haaretz": BiasRating.LEFT,
        "kyiv independent": BiasRating.CENTER,
        "moscow times": BiasRating.CENTER_LEFT,  # Independent Russian media
        "cbc": BiasRating.CENTER_LEFT,
        "cbc news": BiasRating.CENTER_LEFT,
        "global news": BiasRating.CENTER,
        "ctv news": BiasRating.CENTER,
        "toronto star": BiasRating.LEFT,
        "national post": BiasRating.CENTER_RIGHT,
        "the globe and mail": BiasRating.CENTER_RIGHT,
        "sky news": BiasRating.CENTER_RIGHT,  # UK
        "sky news australia": BiasRating.RIGHT,
        "daily mail": BiasRating.RIGHT,
        "the sun": BiasRating.RIGHT,
        "the mirror": BiasRating.LEFT,
        "the telegraph": BiasRating.RIGHT,
        "daily telegraph": BiasRating.RIGHT,
        "financial review": BiasRating.CENTER_RIGHT,
        "smh": BiasRating.CENTER_LEFT,
        "sydney morning herald": BiasRating.CENTER_LEFT,
        "the age": BiasRating.CENTER_LEFT,
        "abc news (au)": BiasRating.CENTER_LEFT,

        # Other US
        "new york post": BiasRating.RIGHT,
        "nypost": BiasRating.RIGHT,
        "chicago tribune": BiasRating.CENTER,
        "los angeles times": BiasRating.CENTER_LEFT,
        "la times": BiasRating.CENTER_LEFT,
        "sf chronicle": BiasRating.CENTER_LEFT,
        "boston globe": BiasRating.CENTER_LEFT,
        "miami herald": BiasRating.CENTER,
        "dallas morning news": BiasRating.CENTER_RIGHT,
        "houston chronicle": BiasRating.CENTER_LEFT,
        "denver post": BiasRating.CENTER,
        "seattle times": BiasRating.CENTER_LEFT,
        "star tribune": BiasRating.CENTER_LEFT,
        "philadelphia inquirer": BiasRating.CENTER_LEFT,
        "atlanta journal-constitution": BiasRating.CENTER,
        "detroit free press": BiasRating.CENTER_LEFT,
        "arizona republic": BiasRating.CENTER_RIGHT,
        "las vegas review-journal": BiasRating.CENTER_RIGHT,
        "san diego union-tribune": BiasRating.CENTER_LEFT,
        "orange county register": BiasRating.CENTER_RIGHT,
        "new york daily news": BiasRating.LEFT,
        "newsday": BiasRating.CENTER,
        "christian science monitor": BiasRating.CENTER,
        "cs monitor": BiasRating.CENTER,
        "propublica": BiasRating.CENTER_LEFT,
        "the intercept": BiasRating.LEFT,
        "democracy now!": BiasRating.LEFT,
        "common dreams": BiasRating.LEFT,
        "truthout": BiasRating.LEFT,
        "raw story": BiasRating.LEFT,
        "daily kos": BiasRating.LEFT,
        "salon": BiasRating.LEFT,
        "rolling stone": BiasRating.LEFT,
        "vanity fair": BiasRating.LEFT,
        "the new yorker": BiasRating.LEFT,
        "esquire": BiasRating.LEFT,
        "gq": BiasRating.LEFT,
        "vogue": BiasRating.LEFT,
        "teen vogue": BiasRating.LEFT,
        "vice": BiasRating.LEFT,
        "vice news": BiasRating.LEFT,
        "buzzfeed": BiasRating.LEFT,
        "buzzfeed news": BiasRating.LEFT,
        "daily beast": BiasRating.LEFT,
        "talking points memo": BiasRating.LEFT,
        "crooks and liars": BiasRating.LEFT,
        "palmer report": BiasRating.LEFT,
        "wonkette": BiasRating.LEFT,
        "jezebel": BiasRating.LEFT,
        "the root": BiasRating.LEFT,
        "theroot": BiasRating.LEFT,
        "essence": BiasRating.LEFT,
        "ebony": BiasRating.LEFT,
        "bet": BiasRating.LEFT,
        "advocate": BiasRating.LEFT,
        "out": BiasRating.LEFT,
        "pinknews": BiasRating.LEFT,
        "auto blog": BiasRating.CENTER,
        "jalopnik": BiasRating.LEFT,
        "deadspin": BiasRating.LEFT,
        "bleacher report": BiasRating.CENTER,
        "espn": BiasRating.CENTER,
        "sports illustrated": BiasRating.CENTER,
        "cbssports": BiasRating.CENTER,
        "nbcsports": BiasRating.CENTER,
        "foxsports": BiasRating.CENTER,  # Sports division is less biased than news
        "mlb": BiasRating.CENTER,
        "nfl": BiasRating.CENTER,
        "nba": BiasRating.CENTER,
        "nhl": BiasRating.CENTER,
        "scientific american": BiasRating.CENTER_LEFT,
        "national geographic": BiasRating.CENTER,
        "smithsonian": BiasRating.CENTER,
        "popular science": BiasRating.CENTER,
        "popular mechanics": BiasRating.CENTER,
        "discover": BiasRating.CENTER,
        "nature": BiasRating.CENTER,
        "science": BiasRating.CENTER,
        "new scientist": BiasRating.CENTER,
        "phys.org": BiasRating.CENTER,
        "space.com": BiasRating.CENTER,
        "nasa": BiasRating.CENTER,
        "jpl": BiasRating.CENTER,
        "noaa": BiasRating.CENTER,
        "cdc": BiasRating.CENTER,
        "who": BiasRating.CENTER,
        "nih": BiasRating.CENTER,
        "fda": BiasRating.CENTER,
        "epa": BiasRating.CENTER,
        "fbi": BiasRating.CENTER,
        "cia": BiasRating.CENTER,
        "dod": BiasRating.CENTER,
        "state department": BiasRating.CENTER,
        "white house": BiasRating.CENTER,  # Official statements
        "congress": BiasRating.CENTER,  # Official records
        "supremecourt": BiasRating.CENTER,  # Official records
        "un": BiasRating.CENTER,
        "united nations": BiasRating.CENTER,
        "imf": BiasRating.CENTER,
        "world bank": BiasRating.CENTER,
        "wto": BiasRating.CENTER,
        "nato": BiasRating.CENTER,
        "eu": BiasRating.CENTER,
        "european union": BiasRating.CENTER,
        "oecd": BiasRating.CENTER,
        "wef": BiasRating.CENTER,
        "world economic forum": BiasRating.CENTER,
        "ted": BiasRating.CENTER_LEFT,
        "project syndicate": BiasRating.CENTER_LEFT,
        "foreign affairs": BiasRating.CENTER,
        "foreign policy": BiasRating.CENTER_LEFT,
        "the diplomat": BiasRating.CENTER,
        "stratfor": BiasRating.CENTER,
        "rand corporation": BiasRating.CENTER,
        "brookings": BiasRating.CENTER_LEFT,
        "cato": BiasRating.CENTER_RIGHT,  # Libertarian
        "heritage foundation": BiasRating.RIGHT,
        "american enterprise institute": BiasRating.RIGHT,
        "center for american progress": BiasRating.LEFT,
        "urban institute": BiasRating.CENTER_LEFT,
        "pew research center": BiasRating.CENTER,
        "gallup": BiasRating.CENTER,
        "rasmussen reports": BiasRating.CENTER_RIGHT,
        "five thirty eight": BiasRating.CENTER,
        "fivethirtyeight": BiasRating.CENTER,
        "real clear politics": BiasRating.CENTER_RIGHT,
        "realclearpolitics": BiasRating.CENTER_RIGHT,
        "cook political report": BiasRating.CENTER,
        "sabato's crystal ball": BiasRating.CENTER,
        "inside elections": BiasRating.CENTER,
        "ballotpedia": BiasRating.CENTER,
        "opensecrets": BiasRating.CENTER,
        "factcheck.org": BiasRating.CENTER,
        "politifact": BiasRating.CENTER_LEFT,
        "snopes": BiasRating.CENTER_LEFT,
        "washington post fact checker": BiasRating.CENTER_LEFT,
        "cnn fact check": BiasRating.CENTER_LEFT,
        "ap fact check": BiasRating.CENTER,
        "reuters fact check": BiasRating.CENTER,
        "afp fact check": BiasRating.CENTER,
        "full fact": BiasRating.CENTER,
        "bbc reality check": BiasRating.CENTER,
        "channel 4 factcheck": BiasRating.CENTER,
        "the conversation": BiasRating.CENTER_LEFT,
        "medium": BiasRating.CENTER_LEFT,  # Platform, but tends left
        "substack": BiasRating.CENTER,  # Platform, varies widely
        "youtube": BiasRating.CENTER,  # Platform
        "twitter": BiasRating.CENTER,  # Platform
        "facebook": BiasRating.CENTER,  # Platform
        "reddit": BiasRating.CENTER_LEFT,  # Platform
        "google news": BiasRating.CENTER,  # Aggregator
        "apple news": BiasRating.CENTER,  # Aggregator
        "yahoo news": BiasRating.CENTER,  # Aggregator
        "msn": BiasRating.CENTER,  # Aggregator
        "flipboard": BiasRating.CENTER,  # Aggregator
        "smartnews": BiasRating.CENTER,  # Aggregator
        "newsbreak": BiasRating.CENTER,  # Aggregator
        "drudge report": BiasRating.RIGHT,
        "zerohedge": BiasRating.RIGHT,
        "infowars": BiasRating.RIGHT,  # Extreme right
        "natural news": BiasRating.RIGHT,  # Pseudoscience/Right
        "before it's news": BiasRating.RIGHT,
        "western journal": BiasRating.RIGHT,
        "wnd": BiasRating.RIGHT,
        "world net daily": BiasRating.RIGHT,
        "pj media": BiasRating.RIGHT,
        "twitchy": BiasRating.RIGHT,
        "hot air": BiasRating.RIGHT,
        "power line": BiasRating.RIGHT,
        "legal insurrection": BiasRating.RIGHT,
        "american thinker": BiasRating.RIGHT,
        "frontpage mag": BiasRating.RIGHT,
        "mrc": BiasRating.RIGHT,
        "media research center": BiasRating.RIGHT,
        "newsbusters": BiasRating.RIGHT,
        "cns news": BiasRating.RIGHT,
        "free beacon": BiasRating.RIGHT,
        "washington free beacon": BiasRating.RIGHT,
        "daily wire": BiasRating.RIGHT,
        "the daily wire": BiasRating.RIGHT,
        "daily signal": BiasRating.RIGHT,
        "heritage": BiasRating.RIGHT,
        "judicial watch": BiasRating.RIGHT,
        "project veritas": BiasRating.RIGHT,
        "epoch times": BiasRating.RIGHT,
        "the epoch times": BiasRating.RIGHT,
        "ntd": BiasRating.RIGHT,
        "one america news": BiasRating.RIGHT,
        "oan": BiasRating.RIGHT,
        "newsmax tv": BiasRating.RIGHT,
        "blaze media": BiasRating.RIGHT,
        "glenn beck": BiasRating.RIGHT,
        "rush limbaugh": BiasRating.RIGHT,
        "sean hannity": BiasRating.RIGHT,
        "tucker carlson": BiasRating.RIGHT,
        "mark levin": BiasRating.RIGHT,
        "ben shapiro": BiasRating.RIGHT,
        "steven crowder": BiasRating.RIGHT,
        "charlie kirk": BiasRating.RIGHT,
        "turning point usa": BiasRating.RIGHT,
        "prageru": BiasRating.RIGHT,
        "daily mail online": BiasRating.RIGHT,
        "mail online": BiasRating.RIGHT,
        "express": BiasRating.RIGHT,
        "daily express": BiasRating.RIGHT,
        "daily star": BiasRating.RIGHT,
        "breitbart news": BiasRating.RIGHT,
    }
)
