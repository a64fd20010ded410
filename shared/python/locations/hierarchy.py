"""
Location hierarchy configuration table.

One entry per node, keyed by its canonical lowercase name:

    kind      country | state | region | city
    aliases   strings that identify the node and are used as substring
              search terms against stored location text (the key is
              always implied)
    codes     short abbreviations that resolve to the node on exact match
              but are never used as substring search terms ("ka" would
              match "kolkata")
    children  child keys (country -> states/regions/cities,
              state/region -> cities)

Entries are listed parent first. When two nodes claim the same alias the
first one listed wins, so keep aliases unique across the table.
"""

LOCATION_HIERARCHY: dict[str, dict] = {
    # =========================================================================
    # INDIA
    # =========================================================================
    "india": {
        "kind": "country",
        "aliases": ["india", "indian", "bharat"],
        "children": [
            "tamil nadu", "karnataka", "maharashtra", "delhi", "west bengal",
            "gujarat", "rajasthan", "uttar pradesh", "andhra pradesh", "telangana",
            "kerala", "punjab", "haryana", "odisha", "jharkhand", "assam",
            "madhya pradesh", "chhattisgarh", "uttarakhand", "himachal pradesh",
            "jammu and kashmir", "goa", "bihar", "tripura", "meghalaya", "manipur",
            "nagaland", "mizoram", "arunachal pradesh", "sikkim",
        ],
    },

    # Tamil Nadu
    "tamil nadu": {
        "kind": "state",
        "aliases": ["tamil nadu", "tamilnadu"],
        "codes": ["tn"],
        "children": [
            "chennai", "coimbatore", "madurai", "salem", "tirupur", "erode", "vellore",
            "tiruchirappalli", "tirunelveli", "thanjavur", "tuticorin", "dindigul",
        ],
    },
    "chennai": {
        "kind": "city",
        "aliases": [
            "chennai", "madras", "tambaram", "velachery", "omr", "anna nagar",
            "t nagar", "adyar", "chrompet", "porur", "sholinganallur",
        ],
    },
    "coimbatore": {"kind": "city", "aliases": ["coimbatore", "kovai"]},
    "madurai": {"kind": "city", "aliases": ["madurai"]},
    "salem": {"kind": "city", "aliases": ["salem"]},
    "tirupur": {"kind": "city", "aliases": ["tirupur", "tiruppur"]},
    "erode": {"kind": "city", "aliases": ["erode"]},
    "vellore": {"kind": "city", "aliases": ["vellore"]},
    "tiruchirappalli": {"kind": "city", "aliases": ["tiruchirappalli", "trichy", "tiruchi"]},
    "tirunelveli": {"kind": "city", "aliases": ["tirunelveli"]},
    "thanjavur": {"kind": "city", "aliases": ["thanjavur", "tanjore"]},
    "tuticorin": {"kind": "city", "aliases": ["tuticorin", "thoothukudi"]},
    "dindigul": {"kind": "city", "aliases": ["dindigul"]},

    # Karnataka
    "karnataka": {
        "kind": "state",
        "aliases": ["karnataka"],
        "codes": ["ka"],
        "children": ["bangalore", "mysore", "mangalore", "hubli", "belgaum", "dharwad"],
    },
    "bangalore": {
        "kind": "city",
        "aliases": ["bangalore", "bengaluru", "blr", "whitefield", "electronic city", "koramangala"],
    },
    "mysore": {"kind": "city", "aliases": ["mysore", "mysuru"]},
    "mangalore": {"kind": "city", "aliases": ["mangalore", "mangaluru"]},
    "hubli": {"kind": "city", "aliases": ["hubli", "hubballi"]},
    "belgaum": {"kind": "city", "aliases": ["belgaum", "belagavi"]},
    "dharwad": {"kind": "city", "aliases": ["dharwad"]},

    # Maharashtra
    "maharashtra": {
        "kind": "state",
        "aliases": ["maharashtra"],
        "codes": ["mh"],
        "children": ["mumbai", "thane", "pune", "nagpur", "nashik", "aurangabad", "solapur", "kalyan"],
    },
    "mumbai": {
        "kind": "city",
        "aliases": ["mumbai", "bombay", "navi mumbai", "bandra", "andheri"],
    },
    "thane": {"kind": "city", "aliases": ["thane"]},
    "pune": {"kind": "city", "aliases": ["pune", "pimpri", "chinchwad", "hinjewadi", "wakad"]},
    "nagpur": {"kind": "city", "aliases": ["nagpur"]},
    "nashik": {"kind": "city", "aliases": ["nashik", "nasik"]},
    "aurangabad": {"kind": "city", "aliases": ["aurangabad", "chhatrapati sambhajinagar"]},
    "solapur": {"kind": "city", "aliases": ["solapur"]},
    "kalyan": {"kind": "city", "aliases": ["kalyan"]},

    # Delhi NCR
    "delhi": {
        "kind": "state",
        "aliases": ["delhi", "delhi ncr", "ncr"],
        "children": ["new delhi", "gurgaon", "noida", "faridabad", "ghaziabad"],
    },
    "new delhi": {"kind": "city", "aliases": ["new delhi"]},
    "gurgaon": {"kind": "city", "aliases": ["gurgaon", "gurugram", "cyber city"]},
    "noida": {"kind": "city", "aliases": ["noida", "greater noida"]},
    "faridabad": {"kind": "city", "aliases": ["faridabad"]},
    "ghaziabad": {"kind": "city", "aliases": ["ghaziabad"]},

    # West Bengal
    "west bengal": {
        "kind": "state",
        "aliases": ["west bengal"],
        "codes": ["wb"],
        "children": ["kolkata", "howrah", "durgapur", "siliguri"],
    },
    "kolkata": {"kind": "city", "aliases": ["kolkata", "calcutta"]},
    "howrah": {"kind": "city", "aliases": ["howrah"]},
    "durgapur": {"kind": "city", "aliases": ["durgapur"]},
    "siliguri": {"kind": "city", "aliases": ["siliguri"]},

    # Gujarat
    "gujarat": {
        "kind": "state",
        "aliases": ["gujarat"],
        "children": ["ahmedabad", "surat", "vadodara", "rajkot", "bhavnagar", "gandhinagar"],
    },
    "ahmedabad": {"kind": "city", "aliases": ["ahmedabad", "amdavad"]},
    "surat": {"kind": "city", "aliases": ["surat"]},
    "vadodara": {"kind": "city", "aliases": ["vadodara", "baroda"]},
    "rajkot": {"kind": "city", "aliases": ["rajkot"]},
    "bhavnagar": {"kind": "city", "aliases": ["bhavnagar"]},
    "gandhinagar": {"kind": "city", "aliases": ["gandhinagar"]},

    # Rajasthan
    "rajasthan": {
        "kind": "state",
        "aliases": ["rajasthan"],
        "children": ["jaipur", "jodhpur", "udaipur", "kota", "ajmer", "bikaner"],
    },
    "jaipur": {"kind": "city", "aliases": ["jaipur"]},
    "jodhpur": {"kind": "city", "aliases": ["jodhpur"]},
    "udaipur": {"kind": "city", "aliases": ["udaipur"]},
    "kota": {"kind": "city", "aliases": ["kota"]},
    "ajmer": {"kind": "city", "aliases": ["ajmer"]},
    "bikaner": {"kind": "city", "aliases": ["bikaner"]},

    # Uttar Pradesh
    "uttar pradesh": {
        "kind": "state",
        "aliases": ["uttar pradesh"],
        "codes": ["up"],
        "children": ["lucknow", "kanpur", "agra", "varanasi", "meerut", "prayagraj", "bareilly"],
    },
    "lucknow": {"kind": "city", "aliases": ["lucknow"]},
    "kanpur": {"kind": "city", "aliases": ["kanpur"]},
    "agra": {"kind": "city", "aliases": ["agra"]},
    "varanasi": {"kind": "city", "aliases": ["varanasi", "banaras", "benares"]},
    "meerut": {"kind": "city", "aliases": ["meerut"]},
    "prayagraj": {"kind": "city", "aliases": ["prayagraj", "allahabad"]},
    "bareilly": {"kind": "city", "aliases": ["bareilly"]},

    # Andhra Pradesh
    "andhra pradesh": {
        "kind": "state",
        "aliases": ["andhra pradesh", "andhra"],
        "codes": ["ap"],
        "children": ["vijayawada", "visakhapatnam", "guntur", "tirupati"],
    },
    "vijayawada": {"kind": "city", "aliases": ["vijayawada"]},
    "visakhapatnam": {"kind": "city", "aliases": ["visakhapatnam", "vizag"]},
    "guntur": {"kind": "city", "aliases": ["guntur"]},
    "tirupati": {"kind": "city", "aliases": ["tirupati"]},

    # Telangana
    "telangana": {
        "kind": "state",
        "aliases": ["telangana"],
        "children": ["hyderabad", "warangal", "nizamabad"],
    },
    "hyderabad": {"kind": "city", "aliases": ["hyderabad", "secunderabad"]},
    "warangal": {"kind": "city", "aliases": ["warangal"]},
    "nizamabad": {"kind": "city", "aliases": ["nizamabad"]},

    # Kerala
    "kerala": {
        "kind": "state",
        "aliases": ["kerala"],
        "children": ["kochi", "thiruvananthapuram", "kozhikode", "kottayam", "thrissur"],
    },
    "kochi": {"kind": "city", "aliases": ["kochi", "cochin", "ernakulam"]},
    "thiruvananthapuram": {"kind": "city", "aliases": ["thiruvananthapuram", "trivandrum"]},
    "kozhikode": {"kind": "city", "aliases": ["kozhikode", "calicut"]},
    "kottayam": {"kind": "city", "aliases": ["kottayam"]},
    "thrissur": {"kind": "city", "aliases": ["thrissur", "trichur"]},

    # Punjab
    "punjab": {
        "kind": "state",
        "aliases": ["punjab"],
        "children": ["chandigarh", "ludhiana", "amritsar", "jalandhar", "patiala"],
    },
    "chandigarh": {"kind": "city", "aliases": ["chandigarh"]},
    "ludhiana": {"kind": "city", "aliases": ["ludhiana"]},
    "amritsar": {"kind": "city", "aliases": ["amritsar"]},
    "jalandhar": {"kind": "city", "aliases": ["jalandhar"]},
    "patiala": {"kind": "city", "aliases": ["patiala"]},

    # Haryana
    "haryana": {
        "kind": "state",
        "aliases": ["haryana"],
        "children": ["panipat", "ambala", "karnal"],
    },
    "panipat": {"kind": "city", "aliases": ["panipat"]},
    "ambala": {"kind": "city", "aliases": ["ambala"]},
    "karnal": {"kind": "city", "aliases": ["karnal"]},

    # Odisha
    "odisha": {
        "kind": "state",
        "aliases": ["odisha", "orissa"],
        "children": ["bhubaneswar", "cuttack", "rourkela", "brahmapur"],
    },
    "bhubaneswar": {"kind": "city", "aliases": ["bhubaneswar"]},
    "cuttack": {"kind": "city", "aliases": ["cuttack"]},
    "rourkela": {"kind": "city", "aliases": ["rourkela"]},
    "brahmapur": {"kind": "city", "aliases": ["brahmapur", "berhampur"]},

    # Jharkhand
    "jharkhand": {
        "kind": "state",
        "aliases": ["jharkhand"],
        "children": ["ranchi", "jamshedpur", "dhanbad", "bokaro"],
    },
    "ranchi": {"kind": "city", "aliases": ["ranchi"]},
    "jamshedpur": {"kind": "city", "aliases": ["jamshedpur"]},
    "dhanbad": {"kind": "city", "aliases": ["dhanbad"]},
    "bokaro": {"kind": "city", "aliases": ["bokaro"]},

    # Assam
    "assam": {
        "kind": "state",
        "aliases": ["assam"],
        "children": ["guwahati", "dibrugarh", "silchar", "jorhat"],
    },
    "guwahati": {"kind": "city", "aliases": ["guwahati", "gauhati"]},
    "dibrugarh": {"kind": "city", "aliases": ["dibrugarh"]},
    "silchar": {"kind": "city", "aliases": ["silchar"]},
    "jorhat": {"kind": "city", "aliases": ["jorhat"]},

    # Madhya Pradesh
    "madhya pradesh": {
        "kind": "state",
        "aliases": ["madhya pradesh"],
        "codes": ["mp"],
        "children": ["bhopal", "indore", "jabalpur", "gwalior", "ujjain"],
    },
    "bhopal": {"kind": "city", "aliases": ["bhopal"]},
    "indore": {"kind": "city", "aliases": ["indore"]},
    "jabalpur": {"kind": "city", "aliases": ["jabalpur"]},
    "gwalior": {"kind": "city", "aliases": ["gwalior"]},
    "ujjain": {"kind": "city", "aliases": ["ujjain"]},

    # Chhattisgarh
    "chhattisgarh": {
        "kind": "state",
        "aliases": ["chhattisgarh"],
        "children": ["raipur", "bhilai", "bilaspur"],
    },
    "raipur": {"kind": "city", "aliases": ["raipur"]},
    "bhilai": {"kind": "city", "aliases": ["bhilai"]},
    "bilaspur": {"kind": "city", "aliases": ["bilaspur"]},

    # Uttarakhand
    "uttarakhand": {
        "kind": "state",
        "aliases": ["uttarakhand", "uttaranchal"],
        "children": ["dehradun", "haridwar", "roorkee", "nainital"],
    },
    "dehradun": {"kind": "city", "aliases": ["dehradun"]},
    "haridwar": {"kind": "city", "aliases": ["haridwar"]},
    "roorkee": {"kind": "city", "aliases": ["roorkee"]},
    "nainital": {"kind": "city", "aliases": ["nainital"]},

    # Himachal Pradesh
    "himachal pradesh": {
        "kind": "state",
        "aliases": ["himachal pradesh", "himachal"],
        "codes": ["hp"],
        "children": ["shimla", "dharamshala", "manali"],
    },
    "shimla": {"kind": "city", "aliases": ["shimla"]},
    "dharamshala": {"kind": "city", "aliases": ["dharamshala"]},
    "manali": {"kind": "city", "aliases": ["manali"]},

    # Jammu and Kashmir
    "jammu and kashmir": {
        "kind": "state",
        "aliases": ["jammu and kashmir", "jammu & kashmir", "j&k"],
        "children": ["srinagar", "jammu"],
    },
    "srinagar": {"kind": "city", "aliases": ["srinagar"]},
    "jammu": {"kind": "city", "aliases": ["jammu"]},

    # Goa
    "goa": {
        "kind": "state",
        "aliases": ["goa"],
        "children": ["panaji", "margao", "vasco da gama"],
    },
    "panaji": {"kind": "city", "aliases": ["panaji", "panjim"]},
    "margao": {"kind": "city", "aliases": ["margao", "madgaon"]},
    "vasco da gama": {"kind": "city", "aliases": ["vasco da gama", "vasco"]},

    # Bihar
    "bihar": {
        "kind": "state",
        "aliases": ["bihar"],
        "children": ["patna", "gaya", "muzaffarpur", "bhagalpur"],
    },
    "patna": {"kind": "city", "aliases": ["patna"]},
    "gaya": {"kind": "city", "aliases": ["gaya"]},
    "muzaffarpur": {"kind": "city", "aliases": ["muzaffarpur"]},
    "bhagalpur": {"kind": "city", "aliases": ["bhagalpur"]},

    # North East
    "tripura": {"kind": "state", "aliases": ["tripura"], "children": ["agartala"]},
    "agartala": {"kind": "city", "aliases": ["agartala"]},
    "meghalaya": {"kind": "state", "aliases": ["meghalaya"], "children": ["shillong"]},
    "shillong": {"kind": "city", "aliases": ["shillong"]},
    "manipur": {"kind": "state", "aliases": ["manipur"], "children": ["imphal"]},
    "imphal": {"kind": "city", "aliases": ["imphal"]},
    "nagaland": {"kind": "state", "aliases": ["nagaland"], "children": ["kohima"]},
    "kohima": {"kind": "city", "aliases": ["kohima"]},
    "mizoram": {"kind": "state", "aliases": ["mizoram"], "children": ["aizawl"]},
    "aizawl": {"kind": "city", "aliases": ["aizawl"]},
    "arunachal pradesh": {"kind": "state", "aliases": ["arunachal pradesh"], "children": ["itanagar"]},
    "itanagar": {"kind": "city", "aliases": ["itanagar"]},
    "sikkim": {"kind": "state", "aliases": ["sikkim"], "children": ["gangtok"]},
    "gangtok": {"kind": "city", "aliases": ["gangtok"]},

    # =========================================================================
    # SAUDI ARABIA
    # =========================================================================
    "saudi arabia": {
        "kind": "country",
        "aliases": ["saudi arabia", "saudi", "ksa", "kingdom of saudi arabia"],
        "children": [
            "riyadh region", "makkah region", "madinah region", "eastern province",
            "tabuk", "abha", "khamis mushait", "buraidah", "najran", "hail", "jizan",
        ],
    },
    "riyadh region": {
        "kind": "region",
        "aliases": ["riyadh region", "riyadh province"],
        "children": ["riyadh"],
    },
    "riyadh": {"kind": "city", "aliases": ["riyadh", "ar riyadh"]},
    "makkah region": {
        "kind": "region",
        "aliases": ["makkah region", "mecca region", "makkah province"],
        "children": ["jeddah", "mecca", "taif"],
    },
    "jeddah": {"kind": "city", "aliases": ["jeddah", "jiddah"]},
    "mecca": {"kind": "city", "aliases": ["mecca", "makkah"]},
    "taif": {"kind": "city", "aliases": ["taif"]},
    "madinah region": {
        "kind": "region",
        "aliases": ["madinah region", "medina region", "madinah province"],
        "children": ["medina", "yanbu"],
    },
    "medina": {"kind": "city", "aliases": ["medina", "madinah"]},
    "yanbu": {"kind": "city", "aliases": ["yanbu"]},
    "eastern province": {
        "kind": "region",
        "aliases": ["eastern province", "eastern region", "ash sharqiyah"],
        "children": ["dammam", "khobar", "dhahran", "jubail", "hofuf", "qatif"],
    },
    "dammam": {"kind": "city", "aliases": ["dammam"]},
    "khobar": {"kind": "city", "aliases": ["khobar", "al khobar"]},
    "dhahran": {"kind": "city", "aliases": ["dhahran"]},
    "jubail": {"kind": "city", "aliases": ["jubail", "al jubail"]},
    "hofuf": {"kind": "city", "aliases": ["hofuf", "al-ahsa", "al ahsa"]},
    "qatif": {"kind": "city", "aliases": ["qatif"]},
    "tabuk": {"kind": "city", "aliases": ["tabuk"]},
    "abha": {"kind": "city", "aliases": ["abha"]},
    "khamis mushait": {"kind": "city", "aliases": ["khamis mushait"]},
    "buraidah": {"kind": "city", "aliases": ["buraidah"]},
    "najran": {"kind": "city", "aliases": ["najran"]},
    "hail": {"kind": "city", "aliases": ["hail"]},
    "jizan": {"kind": "city", "aliases": ["jizan", "jazan"]},

    # =========================================================================
    # UNITED ARAB EMIRATES
    # =========================================================================
    "uae": {
        "kind": "country",
        "aliases": ["uae", "united arab emirates", "emirates"],
        "children": [
            "dubai", "abu dhabi", "sharjah", "ajman", "ras al khaimah",
            "fujairah", "umm al quwain",
        ],
    },
    "dubai": {"kind": "city", "aliases": ["dubai", "dxb"]},
    "abu dhabi": {"kind": "city", "aliases": ["abu dhabi", "abudhabi"]},
    "sharjah": {"kind": "city", "aliases": ["sharjah"]},
    "ajman": {"kind": "city", "aliases": ["ajman"]},
    "ras al khaimah": {"kind": "city", "aliases": ["ras al khaimah"], "codes": ["rak"]},
    "fujairah": {"kind": "city", "aliases": ["fujairah"]},
    "umm al quwain": {"kind": "city", "aliases": ["umm al quwain"]},

    # =========================================================================
    # OTHER GCC COUNTRIES
    # =========================================================================
    "qatar": {
        "kind": "country",
        "aliases": ["qatar"],
        "children": ["doha", "al wakrah", "al rayyan"],
    },
    "doha": {"kind": "city", "aliases": ["doha"]},
    "al wakrah": {"kind": "city", "aliases": ["al wakrah"]},
    "al rayyan": {"kind": "city", "aliases": ["al rayyan"]},

    "kuwait": {
        "kind": "country",
        "aliases": ["kuwait"],
        "children": ["kuwait city", "hawalli", "salmiya"],
    },
    "kuwait city": {"kind": "city", "aliases": ["kuwait city"]},
    "hawalli": {"kind": "city", "aliases": ["hawalli"]},
    "salmiya": {"kind": "city", "aliases": ["salmiya"]},

    "oman": {
        "kind": "country",
        "aliases": ["oman"],
        "children": ["muscat", "salalah", "sohar"],
    },
    "muscat": {"kind": "city", "aliases": ["muscat"]},
    "salalah": {"kind": "city", "aliases": ["salalah"]},
    "sohar": {"kind": "city", "aliases": ["sohar"]},

    "bahrain": {
        "kind": "country",
        "aliases": ["bahrain"],
        "children": ["manama", "muharraq", "riffa"],
    },
    "manama": {"kind": "city", "aliases": ["manama"]},
    "muharraq": {"kind": "city", "aliases": ["muharraq"]},
    "riffa": {"kind": "city", "aliases": ["riffa"]},
}
