# catalog_data.py
# Per-region disposal bins. Region keys are ISO country codes.
#
# Bin order matters: the classifier returns the FIRST bin whose name or
# description mentions a material keyword, so specific bins go before
# general ones. Descriptions keep the local term but spell the materials out
# in English so one keyword list covers every region. Anything that is NOT
# accepted goes in "notes", which is never matched.

CATALOG = {
    "US": {
        "name": "United States",
        "bins": [
            {
                "name": "Recycling (Blue Bin)",
                "color": "blue",
                "description": "Mixed recycling: paper, cardboard, plastic bottles and tubs, "
                               "metal cans and glass bottles and jars.",
                "items": ["Newspaper", "Cereal boxes", "Plastic bottles", "Soda cans", "Glass jars"],
                "notes": "Keep items loose, not bagged. No plastic film.",
            },
            {
                "name": "Compost (Green Bin)",
                "color": "green",
                "description": "Food scraps, yard and garden trimmings, and food-soiled paper where accepted.",
                "items": ["Fruit peels", "Coffee grounds", "Grass clippings", "Pizza box liners"],
            },
            {
                "name": "Landfill (Black Bin)",
                "color": "gray",
                "description": "Landfill: general trash not accepted in the other carts, "
                               "such as chip bags and diapers.",
                "items": ["Chip bags", "Diapers", "Broken ceramics"],
            },
            {
                "name": "Household Hazardous Waste",
                "color": "red",
                "description": "Drop-off for batteries, paint, chemicals and fluorescent bulbs.",
                "items": ["AA batteries", "Paint cans", "Fluorescent tubes"],
            },
            {
                "name": "Electronics Recycling",
                "color": "purple",
                "description": "Drop-off for electronic devices: phones, laptops, TVs and chargers.",
                "items": ["Old phones", "Laptops", "Cables"],
            },
        ],
    },

    "DE": {
        "name": "Germany",
        "bins": [
            {
                "name": "Blaue Tonne (Blue Bin)",
                "color": "blue",
                "description": "Altpapier: paper and cardboard, newspapers, magazines and boxes.",
                "items": ["Zeitungen", "Kartons", "Prospekte"],
            },
            {
                "name": "Gelbe Tonne (Yellow Bin)",
                "color": "yellow",
                "description": "Leichtverpackungen (lightweight packaging): plastic packaging, "
                               "metal cans, aluminium and drink cartons.",
                "items": ["Joghurtbecher", "Konservendosen", "Tetra Pak"],
                "notes": "Sometimes a Gelber Sack instead of a bin.",
            },
            {
                "name": "Glascontainer (Glass Bank)",
                "color": "green",
                "description": "Altglas: glass bottles and jars, sorted into white, green and brown.",
                "items": ["Weinflaschen", "Marmeladengläser"],
                "notes": "Blue glass goes with green.",
            },
            {
                "name": "Biotonne (Brown Bin)",
                "color": "brown",
                "description": "Bioabfall: organic kitchen and garden waste, fruit and vegetable peels, "
                               "coffee grounds.",
                "items": ["Obstschalen", "Kaffeesatz", "Rasenschnitt"],
            },
            {
                "name": "Restmülltonne (Black Bin)",
                "color": "black",
                "description": "Restmüll: residual waste that fits no other bin, such as hygiene "
                               "products, ashes and vacuum bags.",
                "items": ["Windeln", "Staubsaugerbeutel", "Asche"],
            },
            {
                "name": "Batteriesammlung (Battery Collection)",
                "color": "red",
                "description": "Batteries and accumulators go to collection points in shops.",
                "items": ["Batterien", "Akkus"],
            },
            {
                "name": "Wertstoffhof (Recycling Centre)",
                "color": "orange",
                "description": "Electronic devices, large appliances, phones and chargers.",
                "items": ["Handys", "Toaster", "Ladegeräte"],
            },
        ],
    },

    "JP": {
        "name": "Japan",
        "bins": [
            {
                "name": "Shigen Gomi: Kami (Recyclable Paper)",
                "color": "blue",
                "description": "Newspapers, magazines, cardboard boxes and paper cartons, tied in bundles.",
                "items": ["Newspapers", "Milk cartons", "Cardboard"],
            },
            {
                "name": "Petto Botoru (PET Bottles)",
                "color": "green",
                "description": "PET plastic bottles with caps and labels removed.",
                "items": ["Drink bottles", "Soy sauce bottles"],
            },
            {
                "name": "Pura (Plastic Containers)",
                "color": "orange",
                "description": "Plastic containers and wrappers marked with the pura symbol.",
                "items": ["Bento trays", "Snack wrappers"],
            },
            {
                "name": "Bin / Kan (Bottles and Cans)",
                "color": "yellow",
                "description": "Glass bottles and jars, aluminium and steel cans, rinsed.",
                "items": ["Beer bottles", "Coffee cans"],
            },
            {
                "name": "Moeru Gomi (Burnable Garbage)",
                "color": "red",
                "description": "Burnable garbage: kitchen scraps, food waste, soiled paper, small wood "
                               "items and clothing.",
                "items": ["Food scraps", "Tissues", "Leather shoes"],
                "notes": "Drain kitchen waste before putting it out.",
            },
            {
                "name": "Moenai Gomi (Non-burnable Garbage)",
                "color": "gray",
                "description": "Non-burnable garbage: ceramics, small metal items, umbrellas and "
                               "broken glass.",
                "items": ["Ceramic cups", "Umbrellas"],
            },
            {
                "name": "Yugai Gomi (Hazardous Waste)",
                "color": "purple",
                "description": "Batteries, fluorescent tubes, spray cans and lighters.",
                "items": ["Dry-cell batteries", "Lighters"],
            },
            {
                "name": "Kogata Kaden (Small Appliances)",
                "color": "black",
                "description": "Small electronic appliances, phones and chargers to collection boxes.",
                "items": ["Mobile phones", "Digital cameras"],
            },
        ],
    },

    "GB": {
        "name": "United Kingdom",
        "bins": [
            {
                "name": "Recycling Bin (Blue Lid)",
                "color": "blue",
                "description": "Mixed recycling: paper, cardboard, plastic bottles, pots, tubs and "
                               "trays, tins and drink cans.",
                "items": ["Newspapers", "Yoghurt pots", "Baked bean tins"],
            },
            {
                "name": "Glass Box",
                "color": "green",
                "description": "Glass bottles and jars collected separately at the kerbside.",
                "items": ["Wine bottles", "Jam jars"],
            },
            {
                "name": "Food Waste Caddy",
                "color": "brown",
                "description": "Food waste: plate scrapings, fruit and vegetable peelings, tea bags "
                               "and coffee grounds.",
                "items": ["Tea bags", "Eggshells", "Peelings"],
            },
            {
                "name": "Garden Waste Bin (Brown)",
                "color": "brown",
                "description": "Garden waste: grass cuttings, hedge trimmings and leaves.",
                "items": ["Grass", "Leaves"],
                "notes": "Usually a paid subscription service.",
            },
            {
                "name": "General Waste Bin (Black)",
                "color": "black",
                "description": "General rubbish not accepted for recycling, such as crisp packets "
                               "and nappies.",
                "items": ["Crisp packets", "Nappies"],
            },
            {
                "name": "Battery Collection",
                "color": "red",
                "description": "Household batteries in a clear bag on top of the recycling bin.",
                "items": ["AA batteries", "Button cells"],
            },
            {
                "name": "Household Waste Recycling Centre",
                "color": "orange",
                "description": "Electronic items, small appliances, phones and chargers.",
                "items": ["Kettles", "Phones"],
            },
        ],
    },

    "FR": {
        "name": "France",
        "bins": [
            {
                "name": "Bac Jaune (Yellow Bin)",
                "color": "yellow",
                "description": "Emballages et papiers: all plastic packaging, metal cans, paper "
                               "and cardboard.",
                "items": ["Bouteilles plastiques", "Canettes", "Journaux"],
            },
            {
                "name": "Borne à Verre (Glass Bank)",
                "color": "green",
                "description": "Verre: glass bottles, jars and pots, without lids.",
                "items": ["Bouteilles de vin", "Pots de confiture"],
            },
            {
                "name": "Bac à Biodéchets (Food Waste Bin)",
                "color": "brown",
                "description": "Biodéchets: food scraps, fruit and vegetable peelings and coffee grounds.",
                "items": ["Épluchures", "Marc de café"],
            },
            {
                "name": "Bac Gris (Residual Waste)",
                "color": "gray",
                "description": "Ordures ménagères: residual household waste.",
                "items": ["Couches", "Vaisselle cassée"],
            },
            {
                "name": "Collecte Piles (Battery Collection)",
                "color": "red",
                "description": "Piles et accumulateurs: batteries dropped at shop collection points.",
                "items": ["Piles", "Accumulateurs"],
            },
            {
                "name": "Déchèterie (Recycling Centre)",
                "color": "orange",
                "description": "DEEE: electronic and electrical appliances, phones and chargers.",
                "items": ["Téléphones", "Grille-pain"],
            },
        ],
    },

    "ES": {
        "name": "Spain",
        "bins": [
            {
                "name": "Contenedor Azul (Blue Container)",
                "color": "blue",
                "description": "Papel y cartón: paper, cardboard boxes, newspapers and magazines.",
                "items": ["Periódicos", "Cajas de cartón"],
            },
            {
                "name": "Contenedor Amarillo (Yellow Container)",
                "color": "yellow",
                "description": "Envases: plastic bottles and packaging, metal cans, aluminium trays "
                               "and drink cartons.",
                "items": ["Botellas de plástico", "Latas", "Bricks"],
            },
            {
                "name": "Contenedor Verde (Green Container)",
                "color": "green",
                "description": "Vidrio: glass bottles and jars.",
                "items": ["Botellas de vino", "Tarros"],
            },
            {
                "name": "Contenedor Marrón (Brown Container)",
                "color": "brown",
                "description": "Orgánico: food scraps, fruit and vegetable peels, coffee grounds.",
                "items": ["Cáscaras", "Restos de comida"],
            },
            {
                "name": "Contenedor Gris (Grey Container)",
                "color": "gray",
                "description": "Resto: residual waste that goes in no other container.",
                "items": ["Pañales", "Colillas"],
            },
            {
                "name": "Punto Limpio (Recycling Point)",
                "color": "orange",
                "description": "Batteries, electronic devices, phones, chargers and appliances.",
                "items": ["Pilas", "Móviles"],
            },
        ],
    },

    "IT": {
        "name": "Italy",
        "bins": [
            {
                "name": "Carta e Cartone (Paper)",
                "color": "blue",
                "description": "Paper, cardboard, newspapers and flattened boxes.",
                "items": ["Giornali", "Scatole"],
            },
            {
                "name": "Plastica e Metalli (Plastic and Metal)",
                "color": "yellow",
                "description": "Plastic packaging, metal cans, aluminium foil and tins.",
                "items": ["Bottiglie di plastica", "Lattine"],
            },
            {
                "name": "Vetro (Glass)",
                "color": "green",
                "description": "Glass bottles and jars.",
                "items": ["Bottiglie", "Vasetti"],
            },
            {
                "name": "Organico (Organic)",
                "color": "brown",
                "description": "Umido: organic food waste, fruit peels and coffee grounds.",
                "items": ["Bucce", "Fondi di caffè"],
            },
            {
                "name": "Indifferenziato (Residual Waste)",
                "color": "gray",
                "description": "Secco residuo: residual waste, such as nappies and ceramics.",
                "items": ["Pannolini", "Ceramica"],
            },
            {
                "name": "Pile Esauste (Used Batteries)",
                "color": "red",
                "description": "Batteries collected in street and shop containers.",
                "items": ["Pile"],
            },
            {
                "name": "Isola Ecologica (RAEE Collection)",
                "color": "orange",
                "description": "RAEE: electronic waste, small appliances, phones and chargers.",
                "items": ["Cellulari", "Phon"],
            },
        ],
    },

    "CA": {
        "name": "Canada",
        "bins": [
            {
                "name": "Blue Box (Recycling)",
                "color": "blue",
                "description": "Paper, cardboard, plastic bottles and containers, metal cans, "
                               "glass bottles and jars.",
                "items": ["Flyers", "Milk jugs", "Pop cans"],
            },
            {
                "name": "Green Bin (Organics)",
                "color": "green",
                "description": "Food scraps, fruit and vegetable peels, coffee grounds and soiled "
                               "paper towels.",
                "items": ["Peels", "Coffee filters"],
            },
            {
                "name": "Garbage (Black Bin)",
                "color": "black",
                "description": "Garbage not accepted in the Blue Box or Green Bin, such as chip bags "
                               "and diapers.",
                "items": ["Chip bags", "Diapers"],
            },
            {
                "name": "Battery Drop-off",
                "color": "red",
                "description": "Batteries at retail and depot drop-off points.",
                "items": ["AA batteries"],
            },
            {
                "name": "Electronics Depot",
                "color": "purple",
                "description": "Electronic devices, phones, laptops and chargers.",
                "items": ["Phones", "Printers"],
            },
        ],
    },

    "AU": {
        "name": "Australia",
        "bins": [
            {
                "name": "Yellow Lid Bin (Recycling)",
                "color": "yellow",
                "description": "Paper, cardboard, hard plastic containers, glass bottles and jars, "
                               "steel and aluminium cans.",
                "items": ["Newspapers", "Bottles", "Cans"],
            },
            {
                "name": "Green Lid Bin (FOGO)",
                "color": "green",
                "description": "Food Organics Garden Organics: food scraps, fruit peels and garden "
                               "clippings.",
                "items": ["Lawn clippings", "Food scraps"],
            },
            {
                "name": "Red Lid Bin (General Waste)",
                "color": "red",
                "description": "General waste: soft plastics where no drop-off exists, nappies and "
                               "broken crockery.",
                "items": ["Nappies", "Crockery"],
            },
            {
                "name": "Battery Recycling",
                "color": "orange",
                "description": "Batteries dropped at supermarket collection bins.",
                "items": ["AA batteries", "Phone batteries"],
            },
            {
                "name": "E-waste Drop-off",
                "color": "purple",
                "description": "E-waste: electronic devices, phones, laptops and chargers.",
                "items": ["Computers", "Televisions"],
            },
        ],
    },

    "IN": {
        "name": "India",
        "bins": [
            {
                "name": "Green Bin (Wet Waste)",
                "color": "green",
                "description": "Wet waste: kitchen waste, food leftovers, fruit and vegetable peels.",
                "items": ["Vegetable peels", "Tea leaves"],
            },
            {
                "name": "Blue Bin (Dry Waste)",
                "color": "blue",
                "description": "Dry waste: paper, cardboard, plastic, metal cans and glass.",
                "items": ["Milk packets", "Newspapers", "Bottles"],
            },
            {
                "name": "Red Bin (Domestic Hazardous)",
                "color": "red",
                "description": "Domestic hazardous waste: batteries, expired medicines, bulbs and paint.",
                "items": ["Batteries", "Tube lights"],
            },
            {
                "name": "Black Bin (Reject Waste)",
                "color": "black",
                "description": "Reject waste: general non-recyclable items such as sanitary waste.",
                "items": ["Sanitary pads", "Diapers"],
            },
            {
                "name": "E-waste Collection Centre",
                "color": "purple",
                "description": "Electronic waste: phones, chargers and small appliances.",
                "items": ["Mobile phones", "Chargers"],
            },
        ],
    },

    "KR": {
        "name": "South Korea",
        "bins": [
            {
                "name": "Jongnyangje (Volume-based Waste Bag)",
                "color": "white",
                "description": "General waste in prepaid volume-rate bags.",
                "items": ["Tissues", "Toothbrushes"],
            },
            {
                "name": "Eumsingmul (Food Waste)",
                "color": "yellow",
                "description": "Food waste, fruit peels, vegetable scraps in food waste bins.",
                "items": ["Leftover rice", "Fruit peels"],
                "notes": "Bones, shells and tea bags go in the general waste bag.",
            },
            {
                "name": "Jongiryu (Paper)",
                "color": "blue",
                "description": "Paper, newspapers and flattened cardboard boxes.",
                "items": ["Newspapers", "Boxes"],
            },
            {
                "name": "Peullaseutik (Plastic)",
                "color": "orange",
                "description": "Plastic containers and bottles, rinsed with labels removed.",
                "items": ["PET bottles", "Takeout containers"],
            },
            {
                "name": "Yuribyeong (Glass Bottles)",
                "color": "green",
                "description": "Glass bottles, rinsed with caps removed.",
                "items": ["Soju bottles"],
            },
            {
                "name": "Kaenryu (Cans)",
                "color": "gray",
                "description": "Aluminium and steel cans, metal scraps.",
                "items": ["Drink cans"],
            },
            {
                "name": "Pyegeonjeonji (Used Batteries)",
                "color": "red",
                "description": "Used batteries in dedicated collection boxes.",
                "items": ["AA batteries"],
            },
            {
                "name": "Pyegajeon (Waste Appliances)",
                "color": "purple",
                "description": "Electronic appliances, phones and chargers; free pickup for large items.",
                "items": ["Refrigerators", "Phones"],
            },
        ],
    },

    "NL": {
        "name": "Netherlands",
        "bins": [
            {
                "name": "Papier en Karton (Paper Container)",
                "color": "blue",
                "description": "Paper and cardboard: newspapers, magazines and boxes.",
                "items": ["Kranten", "Dozen"],
            },
            {
                "name": "PMD (Plastic, Metal and Drink Cartons)",
                "color": "orange",
                "description": "PMD: plastic packaging, metal cans and drink cartons.",
                "items": ["Plastic flessen", "Blikjes", "Pakken"],
            },
            {
                "name": "Glasbak (Glass Bank)",
                "color": "green",
                "description": "Glass bottles and jars, sorted by colour.",
                "items": ["Flessen", "Potten"],
            },
            {
                "name": "GFT-bak (Green Bin)",
                "color": "green",
                "description": "GFT: vegetable, fruit and garden waste, plus food scraps.",
                "items": ["Schillen", "Koffiedik"],
            },
            {
                "name": "Restafval (Residual Waste)",
                "color": "gray",
                "description": "Residual waste that fits no other container.",
                "items": ["Luiers", "Stofzuigerzakken"],
            },
            {
                "name": "Batterijen (Battery Collection)",
                "color": "red",
                "description": "Batteries to the collection points in shops.",
                "items": ["Batterijen"],
            },
            {
                "name": "Milieustraat (Recycling Centre)",
                "color": "orange",
                "description": "Electronic appliances, phones and chargers.",
                "items": ["Telefoons", "Opladers"],
            },
        ],
    },
}
