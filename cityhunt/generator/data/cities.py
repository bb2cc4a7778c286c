# Built-in word source: European cities, as display names.

EUROPEAN_CITIES = [
    'Lisbon',
    'Madrid',
    'Paris',
    'Berlin',
    'Rome',
    'Vienna',
    'Prague',
    'Warsaw',
    'Budapest',
    'Copenhagen',
    'Stockholm',
    'Oslo',
    'Helsinki',
    'Reykjavik',
    'Dublin',
    'Brussels',
    'Amsterdam',
    'Luxembourg',
    'Zurich',
    'Geneva',
    'Barcelona',
    'Valencia',
    'Seville',
    'Porto',
    'Athens',
    'Thessaloniki',
    'Sofia',
    'Belgrade',
    'Zagreb',
    'Ljubljana',
    'Sarajevo',
    'Skopje',
    'Tallinn',
    'Riga',
    'Vilnius',
    'Krakow',
    'Gdansk',
    'Bucharest',
    'Cluj-Napoca',
    'Istanbul',
    'Ankara',
    'Split',
    'Monaco',
    'Nice',
    'Marseille',
    'Hamburg',
    'Munich',
    'Cologne',
    'Glasgow',
    'Edinburgh',
    'Venice',
]
