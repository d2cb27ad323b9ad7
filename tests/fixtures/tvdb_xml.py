"""
Documents XML TVDB de test.

Reproduisent le format des reponses de l'API XML publique de TVDB
(http://thetvdb.com/api).
"""

SERIES_SEARCH_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Series>
    <seriesid>81189</seriesid>
    <language>en</language>
    <SeriesName>Breaking Bad</SeriesName>
    <banner>graphical/81189-g21.jpg</banner>
    <Overview>Walter White, a struggling high school chemistry teacher, is diagnosed with advanced lung cancer.</Overview>
    <FirstAired>2008-01-20</FirstAired>
    <IMDB_ID>tt0903747</IMDB_ID>
    <zap2it_id>SH01009396</zap2it_id>
    <id>81189</id>
  </Series>
  <Series>
    <seriesid>273181</seriesid>
    <language>en</language>
    <SeriesName>Breaking Bad: Original Minisodes</SeriesName>
    <id>273181</id>
  </Series>
</Data>
"""

SERIES_BASE_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Series>
    <id>81189</id>
    <Actors>|Bryan Cranston|Aaron Paul|</Actors>
    <SeriesName>Breaking Bad</SeriesName>
    <Overview>Tom &amp;amp; Jerry &amp;quot;live&amp;quot;</Overview>
    <IMDB_ID>tt0903747</IMDB_ID>
    <zap2it_id>SH01009396</zap2it_id>
    <Runtime>60</Runtime>
  </Series>
</Data>
"""

SERIES_EMPTY_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<Data></Data>
"""

# Document "all": un bloc Series suivi des episodes tries par saison
EPISODES_ALL_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Series>
    <id>81189</id>
    <SeriesName>Breaking Bad</SeriesName>
  </Series>
  <Episode>
    <id>1000</id>
    <EpisodeName>Pilot special</EpisodeName>
    <EpisodeNumber>1</EpisodeNumber>
    <FirstAired>2007-12-01</FirstAired>
    <SeasonNumber>0</SeasonNumber>
    <seriesid>81189</seriesid>
  </Episode>
  <Episode>
    <id>349232</id>
    <EpisodeName>Pilot</EpisodeName>
    <EpisodeNumber>1</EpisodeNumber>
    <FirstAired>2008-01-20</FirstAired>
    <IMDB_ID>tt0959621</IMDB_ID>
    <Overview>Walter White learns he has cancer.</Overview>
    <SeasonNumber>1</SeasonNumber>
    <seriesid>81189</seriesid>
  </Episode>
  <Episode>
    <id>349235</id>
    <EpisodeName>Cat&amp;apos;s in the Bag...</EpisodeName>
    <EpisodeNumber>2</EpisodeNumber>
    <FirstAired>2008-01-27</FirstAired>
    <SeasonNumber>1</SeasonNumber>
    <seriesid>81189</seriesid>
  </Episode>
  <Episode>
    <id>438899</id>
    <EpisodeName>Seven Thirty-Seven</EpisodeName>
    <EpisodeNumber>1</EpisodeNumber>
    <FirstAired>2009-03-08</FirstAired>
    <SeasonNumber>2</SeasonNumber>
    <seriesid>81189</seriesid>
  </Episode>
</Data>
"""

EPISODE_SINGLE_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Episode>
    <id>349232</id>
    <EpisodeName>Pilot</EpisodeName>
    <EpisodeNumber>1</EpisodeNumber>
    <FirstAired>2008-01-20</FirstAired>
    <SeasonNumber>1</SeasonNumber>
    <seriesid>81189</seriesid>
  </Episode>
</Data>
"""

# Ordre des champs volontairement different d'un enregistrement a l'autre
LANGUAGES_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<Languages>
  <Language>
    <name>Deutsch</name>
    <abbreviation>de</abbreviation>
    <id>14</id>
  </Language>
  <Language>
    <abbreviation>en</abbreviation>
    <name>English</name>
    <id>7</id>
  </Language>
  <Language>
    <name>Fran&amp;ccedil;ais</name>
    <abbreviation>fr</abbreviation>
    <id>17</id>
  </Language>
</Languages>
"""

SERVER_TIME_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<Items>
<Time>1364497200</Time>
</Items>
"""

SERVER_TIME_EMPTY_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<Items>
</Items>
"""

MALFORMED_XML = b"<Data><Series><id>12345</id><SeriesName>Test Show"
