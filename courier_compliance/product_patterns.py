"""
Product Pattern Table
=====================
Ordered keyword patterns for courier product classification
(medicamentos ... seguridad), plus the prohibited and document keyword
lists and display names.

ORDER MATTERS: the classifier keeps the first pattern on score ties, so
patterns are listed in priority order. Authority lists keep their
declared order; advisory text prints them as given.

Authorities (Panamá):
    MINSA       Ministerio de Salud
    AUPSA       Autoridad Panameña de Seguridad de Alimentos
    MIDA        Ministerio de Desarrollo Agropecuario
    ASEP        Autoridad de Servicios Públicos
    ACODECO     Autoridad de Protección al Consumidor
    MiAmbiente  Ministerio de Ambiente
    ATTT        Autoridad de Tránsito
    SINAPROC    Sistema Nacional de Protección Civil
    MINGOB      Ministerio de Gobierno (armas, seguridad)
"""

from dataclasses import dataclass
from typing import Dict, Tuple

AUTHORITIES = ("MINSA", "AUPSA", "MIDA", "ASEP", "ACODECO", "MiAmbiente", "ATTT", "SINAPROC", "MINGOB")


@dataclass(frozen=True)
class ProductPattern:
    category: str
    subcategory: str
    keywords: Tuple[str, ...]
    requires_permit: bool = False
    authorities: Tuple[str, ...] = ()
    restrictions: Tuple[str, ...] = ()


PRODUCT_PATTERNS: Tuple[ProductPattern, ...] = (
    # ═══════════════════════════════════════════
    #  MEDICAMENTOS (MINSA)
    # ═══════════════════════════════════════════
    ProductPattern(
        "medicamentos", "antibioticos",
        (
            "antibiotic", "antibiotico", "amoxicillin", "amoxicilina", "azithromycin",
            "azitromicina", "ciprofloxacin", "ciprofloxacino", "penicillin", "penicilina",
            "cephalexin", "cefalexina", "doxycycline", "doxiciclina", "metronidazole",
            "metronidazol", "clindamycin", "clindamicina", "erythromycin", "eritromicina",
            "tetracycline", "tetraciclina", "ampicillin", "ampicilina", "ceftriaxone",
            "ceftriaxona", "vancomycin", "vancomicina", "gentamicin", "gentamicina",
        ),
        True, ("MINSA",),
        ("Requiere receta médica", "Verificar registro sanitario"),
    ),
    ProductPattern(
        "medicamentos", "analgesicos",
        (
            "painkiller", "analgesic", "analgesico", "ibuprofen", "ibuprofeno",
            "acetaminophen", "acetaminofen", "paracetamol", "naproxen", "naproxeno",
            "aspirin", "aspirina", "diclofenac", "diclofenaco", "ketorolac",
            "ketorolaco", "tramadol", "codeine", "codeina", "morphine", "morfina",
            "oxycodone", "oxicodona", "hydrocodone", "hidrocodona", "fentanyl",
            "fentanilo", "pain relief", "alivio dolor", "dolores", "headache",
            "cefalea", "migraine", "migraña",
        ),
        True, ("MINSA",),
        ("Verificar si es controlado", "Requiere receta para opioides"),
    ),
    ProductPattern(
        "medicamentos", "cardiovascular",
        (
            "blood pressure", "presion arterial", "hipertension", "hypertension",
            "lisinopril", "enalapril", "losartan", "amlodipine", "amlodipino",
            "metoprolol", "atenolol", "carvedilol", "valsartan", "olmesartan",
            "hydrochlorothiazide", "hidroclorotiazida", "furosemide", "furosemida",
            "spironolactone", "espironolactona", "digoxin", "digoxina", "warfarin",
            "warfarina", "clopidogrel", "statin", "estatina", "atorvastatin",
            "atorvastatina", "simvastatin", "simvastatina", "rosuvastatin",
            "rosuvastatina", "cholesterol", "colesterol",
        ),
        True, ("MINSA",),
        ("Requiere receta médica",),
    ),
    ProductPattern(
        "medicamentos", "diabetes",
        (
            "diabetes", "diabetic", "diabetico", "insulin", "insulina", "metformin",
            "metformina", "glipizide", "glipizida", "glimepiride", "glimepirida",
            "sitagliptin", "sitagliptina", "empagliflozin", "empagliflozina",
            "semaglutide", "semaglutida", "ozempic", "wegovy", "trulicity",
            "jardiance", "januvia", "glucose", "glucosa", "blood sugar",
            "azucar sangre", "a1c", "hemoglobina",
        ),
        True, ("MINSA",),
        ("Insulina requiere cadena de frío", "Verificar registro sanitario"),
    ),
    ProductPattern(
        "medicamentos", "oftalmicos",
        (
            "eye drops", "gotas ojos", "gotas oftalmicas", "ophthalmic", "oftalmico",
            "latanoprost", "timolol", "brimonidine", "brimonidina", "glaucoma",
            "artificial tears", "lagrimas artificiales", "lubricante ocular",
            "conjuntivitis", "antihistamine eye", "antihistaminico ocular",
        ),
        True, ("MINSA",),
    ),
    ProductPattern(
        "medicamentos", "dermatologicos",
        (
            "topical", "topico", "cream", "crema", "ointment", "unguento", "lotion",
            "locion", "hydrocortisone", "hidrocortisona", "betamethasone",
            "betametasona", "clotrimazole", "clotrimazol", "ketoconazole",
            "ketoconazol", "antifungal", "antifungico", "antihongos", "acne",
            "retinol", "tretinoin", "tretinoina", "adapalene", "adapaleno",
            "benzoyl peroxide", "peroxido benzoilo", "psoriasis", "eczema",
            "dermatitis", "rash", "sarpullido",
        ),
        True, ("MINSA",),
    ),
    ProductPattern(
        "medicamentos", "respiratorios",
        (
            "inhaler", "inhalador", "asthma", "asma", "bronchitis", "bronquitis",
            "albuterol", "salbutamol", "fluticasone", "fluticasona", "budesonide",
            "budesonida", "montelukast", "singulair", "nebulizer", "nebulizador",
            "cough syrup", "jarabe tos", "expectorant", "expectorante",
            "dextromethorphan", "dextrometorfano", "guaifenesin", "guaifenesina",
            "bronchodilator", "broncodilatador", "copd", "epoc",
        ),
        True, ("MINSA",),
    ),
    ProductPattern(
        "medicamentos", "psiquiatricos",
        (
            "antidepressant", "antidepresivo", "anxiety", "ansiedad", "depression",
            "depresion", "sertraline", "sertralina", "fluoxetine", "fluoxetina",
            "escitalopram", "citalopram", "venlafaxine", "venlafaxina", "duloxetine",
            "duloxetina", "bupropion", "wellbutrin", "prozac", "zoloft", "lexapro",
            "alprazolam", "xanax", "lorazepam", "ativan", "diazepam", "valium",
            "clonazepam", "klonopin", "benzodiazepine", "benzodiazepina", "sleep aid",
            "ayuda dormir", "zolpidem", "ambien", "trazodone", "trazodona",
            "quetiapine", "quetiapina", "risperidone", "risperidona", "aripiprazole",
            "aripiprazol", "lithium", "litio", "bipolar", "schizophrenia",
            "esquizofrenia", "adhd", "tdah", "adderall", "ritalin", "methylphenidate",
            "metilfenidato", "amphetamine", "anfetamina",
        ),
        True, ("MINSA",),
        ("Medicamentos controlados", "Requiere receta especial", "Verificar lista de sustancias controladas"),
    ),
    ProductPattern(
        "medicamentos", "hormonales",
        (
            "hormone", "hormona", "thyroid", "tiroides", "levothyroxine",
            "levotiroxina", "synthroid", "testosterone", "testosterona", "estrogen",
            "estrogeno", "progesterone", "progesterona", "birth control",
            "anticonceptivo", "contraceptive", "contraceptivo", "pill", "pastilla",
            "patch", "parche", "iud", "diu", "nuvaring", "depo-provera",
            "prednisone", "prednisona", "dexamethasone", "dexametasona",
            "hydrocortisone", "hidrocortisona", "cortisol", "steroid", "esteroide",
            "hrt", "trt", "hormone replacement", "reemplazo hormonal",
        ),
        True, ("MINSA",),
        ("Esteroides requieren verificación especial",),
    ),

    # ═══════════════════════════════════════════
    #  SUPLEMENTOS (AUPSA)
    # ═══════════════════════════════════════════
    ProductPattern(
        "suplementos", "vitaminas",
        (
            "vitamin", "vitamina", "multivitamin", "multivitaminico", "vitamin a",
            "vitamin b", "vitamin b12", "vitamin c", "vitamin d", "vitamin d3",
            "vitamin e", "vitamin k", "b complex", "complejo b", "folic acid",
            "acido folico", "biotin", "biotina", "niacin", "niacina", "riboflavin",
            "riboflavina", "thiamine", "tiamina", "pyridoxine", "piridoxina",
            "cobalamin", "cobalamina", "ascorbic acid", "acido ascorbico",
            "retinol", "tocopherol", "tocoferol", "prenatal", "postnatal",
            "children vitamin", "vitamina niños", "gummy vitamin", "vitamina gomita",
        ),
        True, ("AUPSA",),
    ),
    ProductPattern(
        "suplementos", "minerales",
        (
            "mineral", "calcium", "calcio", "magnesium", "magnesio", "iron", "hierro",
            "zinc", "potassium", "potasio", "selenium", "selenio", "copper", "cobre",
            "manganese", "manganeso", "chromium", "cromo", "iodine", "yodo",
            "phosphorus", "fosforo", "multimineral", "electrolyte", "electrolito",
            "bone health", "salud osea", "osteoporosis",
        ),
        True, ("AUPSA",),
    ),
    ProductPattern(
        "suplementos", "proteinas",
        (
            "protein", "proteina", "whey", "suero", "casein", "caseina", "isolate",
            "aislado", "concentrate", "concentrado", "mass gainer", "ganador masa",
            "weight gainer", "muscle", "musculo", "bodybuilding", "culturismo",
            "amino acid", "aminoacido", "bcaa", "eaa", "glutamine", "glutamina",
            "creatine", "creatina", "pre workout", "pre entreno", "post workout",
            "post entreno", "recovery", "recuperacion", "plant protein",
            "proteina vegetal", "pea protein", "proteina arveja", "hemp protein",
            "proteina cañamo", "soy protein", "proteina soya", "collagen",
            "colageno", "peptide", "peptido", "hydrolyzed", "hidrolizado",
        ),
        True, ("AUPSA",),
    ),
    ProductPattern(
        "suplementos", "omega_y_aceites",
        (
            "omega", "omega 3", "omega 6", "omega 9", "fish oil", "aceite pescado",
            "krill oil", "aceite krill", "cod liver oil", "aceite higado bacalao",
            "flaxseed", "linaza", "chia", "evening primrose", "primula", "borage",
            "borraja", "mct oil", "aceite mct", "coconut oil", "aceite coco",
            "dha", "epa", "fatty acid", "acido graso",
        ),
        True, ("AUPSA",),
    ),
    ProductPattern(
        "suplementos", "probioticos",
        (
            "probiotic", "probiotico", "prebiotic", "prebiotico", "synbiotic",
            "sinbiotico", "lactobacillus", "bifidobacterium", "saccharomyces",
            "gut health", "salud intestinal", "digestive", "digestivo", "flora",
            "microbiome", "microbioma", "fermented", "fermentado", "kefir",
            "kombucha", "enzyme", "enzima", "digestive enzyme", "enzima digestiva",
        ),
        True, ("AUPSA",),
    ),
    ProductPattern(
        "suplementos", "hierbas_naturales",
        (
            "herbal", "herbal supplement", "suplemento herbal", "natural", "organic",
            "organico", "turmeric", "curcuma", "curcumin", "curcumina", "ginger",
            "jengibre", "garlic", "ajo", "echinacea", "equinacea", "ginseng",
            "ashwagandha", "rhodiola", "maca", "tribulus", "saw palmetto",
            "milk thistle", "cardo mariano", "valerian", "valeriana", "chamomile",
            "manzanilla", "lavender", "lavanda", "ginkgo", "st john wort",
            "hierba san juan", "elderberry", "sauco", "astragalus", "adaptogen",
            "adaptogeno", "ayurvedic", "ayurvedico", "traditional", "tradicional",
            "botanical", "botanico", "plant extract", "extracto planta", "root",
            "raiz", "leaf", "hoja", "flower", "flor", "bark", "corteza",
        ),
        True, ("AUPSA",),
    ),
    ProductPattern(
        "suplementos", "deportivos",
        (
            "sports nutrition", "nutricion deportiva", "performance", "rendimiento",
            "endurance", "resistencia", "energy", "energia", "caffeine", "cafeina",
            "beta alanine", "beta alanina", "citrulline", "citrulina", "nitric oxide",
            "oxido nitrico", "l-arginine", "l-arginina", "l-carnitine", "l-carnitina",
            "fat burner", "quemador grasa", "thermogenic", "termogenico", "cla",
            "hca", "garcinia", "green tea extract", "extracto te verde", "yohimbine",
            "yohimbina", "testosterone booster", "potenciador testosterona",
            "strength", "fuerza", "power", "potencia", "lean", "definicion",
        ),
        True, ("AUPSA",),
        ("Verificar ingredientes prohibidos WADA",),
    ),

    # ═══════════════════════════════════════════
    #  PRODUCTOS MÉDICOS (MINSA)
    # ═══════════════════════════════════════════
    ProductPattern(
        "productos_medicos", "diagnostico",
        (
            "medical device", "dispositivo medico", "thermometer", "termometro",
            "blood pressure monitor", "tensiometro", "glucometer", "glucometro",
            "oximeter", "oximetro", "pulse oximeter", "oximetro pulso", "stethoscope",
            "estetoscopio", "otoscope", "otoscopio", "ophthalmoscope", "oftalmoscopio",
            "test strip", "tira reactiva", "lancet", "lanceta", "pregnancy test",
            "prueba embarazo", "ovulation test", "prueba ovulacion", "covid test",
            "prueba covid", "rapid test", "prueba rapida", "antigen test",
            "prueba antigeno", "pcr", "diagnostic kit", "kit diagnostico",
        ),
        True, ("MINSA",),
    ),
    ProductPattern(
        "productos_medicos", "consumibles",
        (
            "syringe", "jeringa", "needle", "aguja", "catheter", "cateter", "cannula",
            "canula", "iv set", "set intravenoso", "bandage", "vendaje", "gauze",
            "gasa", "cotton", "algodon", "alcohol swab", "torunda alcohol", "glove",
            "guante", "latex", "nitrile", "nitrilo", "surgical mask", "mascarilla",
            "n95", "kn95", "face shield", "careta", "gown", "bata", "cap", "gorro",
            "shoe cover", "cubre zapato", "suture", "sutura", "staple", "grapa",
            "adhesive strip", "tira adhesiva", "band aid", "curita", "dressing",
            "aposito", "wound care", "cuidado herida",
        ),
        True, ("MINSA",),
    ),
    ProductPattern(
        "productos_medicos", "ortopedia",
        (
            "orthopedic", "ortopedico", "brace", "ferula", "splint", "tablilla",
            "cast", "yeso", "crutch", "muleta", "walker", "andador", "wheelchair",
            "silla ruedas", "cane", "baston", "knee brace", "rodillera", "ankle brace",
            "tobillera", "wrist brace", "muñequera", "back brace", "faja lumbar",
            "neck brace", "collarin", "compression", "compresion", "elastic bandage",
            "venda elastica", "support", "soporte", "posture corrector",
            "corrector postura", "insole", "plantilla", "arch support", "soporte arco",
        ),
        True, ("MINSA",),
    ),
    ProductPattern(
        "productos_medicos", "rehabilitacion",
        (
            "rehabilitation", "rehabilitacion", "physical therapy", "fisioterapia",
            "tens unit", "electroestimulador", "massage", "masaje", "heat pad",
            "almohadilla termica", "ice pack", "bolsa hielo", "foam roller",
            "rodillo espuma", "resistance band", "banda resistencia", "exercise ball",
            "pelota ejercicio", "balance board", "tabla equilibrio", "grip strength",
            "fuerza agarre", "hand exerciser", "ejercitador mano",
        ),
        True, ("MINSA",),
    ),

    # ═══════════════════════════════════════════
    #  VETERINARIOS (MIDA)
    # ═══════════════════════════════════════════
    ProductPattern(
        "veterinarios", "medicamentos_animales",
        (
            "pet medicine", "medicina mascota", "veterinary", "veterinario", "vet",
            "animal health", "salud animal", "flea", "pulga", "tick", "garrapata",
            "heartworm", "gusano corazon", "dewormer", "desparasitante", "antiparasitic",
            "antiparasitario", "frontline", "nexgard", "bravecto", "simparica",
            "heartgard", "interceptor", "revolution", "advantage", "seresto",
            "flea collar", "collar antipulgas", "pet shampoo", "champu mascota",
            "ear cleaner", "limpiador oidos", "eye drops pet", "gotas ojos mascota",
            "joint supplement pet", "suplemento articular mascota", "glucosamine dog",
            "glucosamina perro", "fish oil pet", "aceite pescado mascota",
        ),
        True, ("MIDA",),
    ),
    ProductPattern(
        "veterinarios", "alimentos_animales",
        (
            "pet food", "alimento mascota", "dog food", "comida perro", "cat food",
            "comida gato", "kibble", "croquetas", "wet food", "alimento humedo",
            "dry food", "alimento seco", "raw diet", "dieta cruda", "barf",
            "grain free", "libre granos", "puppy food", "comida cachorro",
            "kitten food", "comida gatito", "senior dog", "perro senior",
            "prescription diet", "dieta prescrita", "hypoallergenic", "hipoalergenico",
            "digestive care", "cuidado digestivo", "weight management", "control peso",
            "treat", "premio", "snack pet", "dental treat", "premio dental",
            "bird food", "comida ave", "fish food", "comida pez", "hamster food",
            "comida hamster", "rabbit food", "comida conejo",
        ),
        True, ("MIDA", "AUPSA"),
    ),
    ProductPattern(
        "veterinarios", "accesorios_mascotas",
        (
            "pet accessory", "accesorio mascota", "collar", "leash", "correa",
            "harness", "arnes", "pet bed", "cama mascota", "pet carrier",
            "transportadora", "crate", "jaula", "kennel", "bowl", "plato", "feeder",
            "comedero", "water fountain", "fuente agua", "litter box", "arenero",
            "litter", "arena", "scratching post", "rascador", "pet toy", "juguete mascota",
            "chew toy", "juguete masticar", "ball", "pelota", "rope toy", "juguete cuerda",
            "pet clothes", "ropa mascota", "dog sweater", "sueter perro", "raincoat dog",
            "impermeable perro", "grooming", "aseo", "brush", "cepillo", "nail clipper",
            "cortauñas", "pet dryer", "secador mascota",
        ),
    ),

    # ═══════════════════════════════════════════
    #  ELECTRÓNICA
    # ═══════════════════════════════════════════
    ProductPattern(
        "electronica", "audio_video",
        (
            "electronics", "electronica", "tv", "television", "televisor", "smart tv",
            "monitor", "projector", "proyector", "speaker", "parlante", "bocina",
            "soundbar", "barra sonido", "headphone", "audifonos", "earphone",
            "auriculares", "earbuds", "airpods", "bluetooth speaker", "parlante bluetooth",
            "home theater", "teatro casa", "receiver", "receptor", "amplifier",
            "amplificador", "subwoofer", "microphone", "microfono", "camera", "camara",
            "webcam", "action camera", "gopro", "drone", "gimbal", "stabilizer",
            "estabilizador", "tripod", "tripode", "lighting", "iluminacion", "ring light",
            "aro luz", "streaming", "vlog", "podcast",
        ),
    ),
    ProductPattern(
        "telefonia", "smartphones",
        (
            "phone", "telefono", "smartphone", "celular", "mobile", "movil", "iphone",
            "samsung", "galaxy", "pixel", "oneplus", "xiaomi", "huawei", "oppo",
            "vivo", "motorola", "nokia", "lg phone", "android phone", "ios",
            "refurbished phone", "telefono reacondicionado", "unlocked", "liberado",
            "dual sim", "doble sim", "5g phone", "telefono 5g", "foldable",
            "plegable", "flip phone", "telefono tapa",
        ),
    ),
    ProductPattern(
        "telefonia", "accesorios_telefono",
        (
            "phone case", "funda telefono", "screen protector", "protector pantalla",
            "tempered glass", "vidrio templado", "charger", "cargador", "cable",
            "usb cable", "lightning cable", "type c", "wireless charger",
            "cargador inalambrico", "power bank", "bateria portatil", "car charger",
            "cargador auto", "phone holder", "soporte telefono", "car mount",
            "soporte auto", "pop socket", "selfie stick", "palo selfie", "gimbal phone",
            "estabilizador telefono", "ring holder", "anillo soporte", "lanyard",
            "cordon", "phone strap", "correa telefono",
        ),
    ),
    ProductPattern(
        "computacion", "computadoras",
        (
            "computer", "computadora", "laptop", "portatil", "notebook", "desktop",
            "escritorio", "pc", "macbook", "chromebook", "gaming laptop",
            "laptop gaming", "workstation", "all in one", "todo en uno", "mini pc",
            "server", "servidor", "tower", "torre", "barebone", "nuc", "intel nuc",
            "mac mini", "mac studio", "mac pro", "imac", "surface", "thinkpad",
            "dell xps", "hp spectre", "asus zenbook", "lenovo yoga",
        ),
    ),
    ProductPattern(
        "computacion", "componentes",
        (
            "cpu", "processor", "procesador", "intel", "amd", "ryzen", "core",
            "motherboard", "placa madre", "tarjeta madre", "ram", "memory", "memoria",
            "ddr4", "ddr5", "ssd", "solid state", "estado solido", "hdd", "hard drive",
            "disco duro", "nvme", "m.2", "sata", "graphics card", "tarjeta grafica",
            "gpu", "nvidia", "geforce", "rtx", "radeon", "rx", "power supply",
            "fuente poder", "psu", "case", "gabinete", "cooling", "enfriamiento",
            "fan", "ventilador", "heatsink", "disipador", "aio", "water cooling",
            "refrigeracion liquida", "thermal paste", "pasta termica",
        ),
    ),
    ProductPattern(
        "computacion", "perifericos",
        (
            "keyboard", "teclado", "mouse", "raton", "mechanical keyboard",
            "teclado mecanico", "gaming mouse", "mouse gaming", "mousepad",
            "alfombrilla", "webcam", "camara web", "usb hub", "hub usb", "docking station",
            "estacion acoplamiento", "external drive", "disco externo", "flash drive",
            "memoria usb", "pendrive", "sd card", "tarjeta sd", "microsd", "card reader",
            "lector tarjetas", "printer", "impresora", "scanner", "escaner",
            "drawing tablet", "tableta dibujo", "wacom", "graphics tablet",
            "tableta grafica", "monitor arm", "brazo monitor", "laptop stand",
            "soporte laptop", "ergonomic", "ergonomico",
        ),
    ),
    ProductPattern(
        "electronica", "wearables",
        (
            "smartwatch", "reloj inteligente", "apple watch", "galaxy watch",
            "fitbit", "garmin", "amazfit", "fitness tracker", "monitor actividad",
            "smart band", "pulsera inteligente", "heart rate monitor",
            "monitor ritmo cardiaco", "gps watch", "reloj gps", "sports watch",
            "reloj deportivo", "smart ring", "anillo inteligente", "vr headset",
            "visor vr", "oculus", "quest", "ar glasses", "lentes ar", "smart glasses",
            "lentes inteligentes",
        ),
    ),
    ProductPattern(
        "electronica", "gaming",
        (
            "game console", "consola", "playstation", "ps5", "ps4", "xbox",
            "nintendo", "switch", "gaming", "video game", "videojuego", "controller",
            "control", "joystick", "gamepad", "gaming headset", "audifonos gaming",
            "gaming chair", "silla gaming", "gaming desk", "escritorio gaming",
            "streaming deck", "capture card", "capturadora", "gaming monitor",
            "monitor gaming", "144hz", "240hz", "curved monitor", "monitor curvo",
            "ultrawide", "rgb", "led strip", "tira led",
        ),
    ),

    # ═══════════════════════════════════════════
    #  ROPA Y CALZADO
    # ═══════════════════════════════════════════
    ProductPattern(
        "ropa", "tops",
        (
            "shirt", "camisa", "blouse", "blusa", "t-shirt", "camiseta", "polo",
            "tank top", "top", "sweater", "sueter", "hoodie", "sudadera", "cardigan",
            "jacket", "chaqueta", "coat", "abrigo", "blazer", "vest", "chaleco",
            "sweatshirt", "jersey", "pullover", "turtleneck", "cuello tortuga",
            "crop top", "button up", "button down", "henley", "thermal", "termica",
            "fleece", "polar", "windbreaker", "rompevientos", "parka", "trench",
            "gabardina", "bomber", "denim jacket", "chaqueta mezclilla", "leather jacket",
            "chaqueta cuero",
        ),
    ),
    ProductPattern(
        "ropa", "bottoms",
        (
            "pants", "pantalon", "jeans", "mezclilla", "denim", "shorts", "short",
            "skirt", "falda", "dress", "vestido", "jumpsuit", "mono", "romper",
            "overalls", "overol", "leggings", "mallas", "joggers", "sweatpants",
            "pantalon deportivo", "chinos", "khakis", "cargo pants", "pantalon cargo",
            "culottes", "palazzo", "capri", "bermuda", "boardshorts", "swim trunks",
            "traje baño", "bikini", "swimsuit", "traje natacion",
        ),
    ),
    ProductPattern(
        "ropa", "interiores",
        (
            "underwear", "ropa interior", "boxer", "brief", "calzon", "panty",
            "panties", "bragas", "bra", "brasier", "sosten", "sports bra",
            "sujetador deportivo", "lingerie", "lenceria", "shapewear", "faja",
            "bodysuit", "camisole", "camisola", "slip", "undershirt", "camiseta interior",
            "thermal underwear", "ropa termica", "sock", "calcetin", "calceta",
            "ankle sock", "no show sock", "compression sock", "media compresion",
            "stocking", "media", "pantyhose", "medias pantalon", "tights", "mallas",
        ),
    ),
    ProductPattern(
        "ropa", "deportiva",
        (
            "sportswear", "ropa deportiva", "activewear", "athletic wear", "gym clothes",
            "ropa gym", "workout", "training", "entrenamiento", "running", "yoga",
            "pilates", "cycling", "ciclismo", "tennis", "tenis", "golf", "basketball",
            "basketball shorts", "football", "soccer", "futbol", "jersey deportivo",
            "compression", "moisture wicking", "dry fit", "performance", "track suit",
            "conjunto deportivo", "warm up", "windbreaker", "rain jacket", "impermeable",
        ),
    ),
    ProductPattern(
        "calzado", "zapatos_casual",
        (
            "shoe", "zapato", "sneaker", "tenis", "zapatilla", "loafer", "mocasin",
            "slip on", "oxford", "derby", "brogue", "monk strap", "boat shoe",
            "zapato nautico", "espadrille", "alpargata", "mule", "clog", "zueco",
            "flat", "ballet flat", "ballerina", "driving shoe", "zapato conducir",
        ),
    ),
    ProductPattern(
        "calzado", "botas",
        (
            "boot", "bota", "ankle boot", "botin", "chelsea boot", "combat boot",
            "bota militar", "hiking boot", "bota senderismo", "work boot",
            "bota trabajo", "cowboy boot", "bota vaquera", "rain boot", "bota lluvia",
            "winter boot", "bota invierno", "snow boot", "bota nieve", "ugg",
            "knee high boot", "bota rodilla", "thigh high", "bota muslo", "riding boot",
            "bota equitacion", "motorcycle boot", "bota moto", "steel toe",
            "punta acero",
        ),
    ),
    ProductPattern(
        "calzado", "deportivo",
        (
            "running shoe", "zapato correr", "training shoe", "zapato entrenamiento",
            "basketball shoe", "zapato basketball", "tennis shoe", "zapato tenis",
            "soccer cleat", "taco futbol", "football cleat", "golf shoe", "zapato golf",
            "hiking shoe", "zapato senderismo", "trail running", "cross training",
            "weightlifting shoe", "zapato pesas", "nike", "adidas", "puma", "reebok",
            "new balance", "asics", "under armour", "saucony", "brooks", "hoka",
            "on running", "converse", "vans", "jordan", "yeezy",
        ),
    ),
    ProductPattern(
        "calzado", "sandalias",
        (
            "sandal", "sandalia", "flip flop", "chancla", "chancleta", "slide",
            "slipper", "pantufla", "house shoe", "zapato casa", "thong sandal",
            "gladiator sandal", "sandalia gladiador", "wedge sandal", "sandalia cuña",
            "platform sandal", "sandalia plataforma", "sport sandal", "sandalia deportiva",
            "birkenstock", "crocs", "teva", "chaco", "reef", "havaianas", "ipanema",
        ),
    ),

    # ═══════════════════════════════════════════
    #  ACCESORIOS
    # ═══════════════════════════════════════════
    ProductPattern(
        "accesorios", "bolsos",
        (
            "bag", "bolso", "purse", "cartera", "handbag", "bolsa mano", "backpack",
            "mochila", "tote", "bolsa tote", "crossbody", "bandolera", "shoulder bag",
            "bolso hombro", "clutch", "sobre", "wallet", "billetera", "card holder",
            "tarjetero", "coin purse", "monedero", "fanny pack", "canguro", "belt bag",
            "riñonera", "duffel bag", "bolsa deportiva", "weekender", "travel bag",
            "bolsa viaje", "laptop bag", "bolsa laptop", "briefcase", "maletin",
            "messenger bag", "satchel", "bucket bag",
        ),
    ),
    ProductPattern(
        "accesorios", "sombreros",
        (
            "hat", "sombrero", "cap", "gorra", "beanie", "gorro", "beret", "boina",
            "fedora", "panama hat", "sombrero panama", "bucket hat", "sombrero pescador",
            "sun hat", "sombrero sol", "visor", "visera", "snapback", "trucker hat",
            "baseball cap", "gorra beisbol", "straw hat", "sombrero paja", "cowboy hat",
            "sombrero vaquero", "winter hat", "gorro invierno", "headband", "diadema",
            "bandana", "pañuelo", "scarf", "bufanda",
        ),
    ),
    ProductPattern(
        "accesorios", "lentes",
        (
            "sunglasses", "lentes sol", "gafas sol", "eyeglasses", "lentes", "gafas",
            "frames", "armazones", "reading glasses", "lentes lectura", "blue light",
            "luz azul", "polarized", "polarizado", "aviator", "wayfarer", "round",
            "cat eye", "ojo gato", "sports glasses", "lentes deportivos", "ski goggles",
            "goggles ski", "swimming goggles", "goggles natacion", "safety glasses",
            "lentes seguridad", "ray ban", "oakley", "prada", "gucci", "versace",
        ),
    ),
    ProductPattern(
        "accesorios", "cinturones",
        (
            "belt", "cinturon", "leather belt", "cinturon cuero", "canvas belt",
            "cinturon lona", "dress belt", "cinturon vestir", "casual belt",
            "cinturon casual", "reversible belt", "cinturon reversible", "braided belt",
            "cinturon trenzado", "western belt", "cinturon vaquero", "suspenders",
            "tirantes", "buckle", "hebilla",
        ),
    ),

    # ═══════════════════════════════════════════
    #  ALIMENTOS Y BEBIDAS (AUPSA)
    # ═══════════════════════════════════════════
    ProductPattern(
        "alimentos", "snacks",
        (
            "snack", "botana", "chips", "papas", "crackers", "galletas", "cookies",
            "pretzels", "popcorn", "palomitas", "nuts", "nueces", "almonds", "almendras",
            "cashews", "anacardos", "peanuts", "mani", "dried fruit", "fruta seca",
            "trail mix", "granola bar", "barra granola", "protein bar", "barra proteina",
            "energy bar", "barra energia", "rice cake", "tortita arroz", "beef jerky",
            "carne seca", "cheese snack", "snack queso",
        ),
        True, ("AUPSA",),
    ),
    ProductPattern(
        "alimentos", "dulces",
        (
            "candy", "dulce", "chocolate", "gummy", "gomita", "lollipop", "paleta",
            "caramel", "caramelo", "hard candy", "dulce duro", "chewy candy",
            "dulce masticable", "licorice", "regaliz", "marshmallow", "malvavisco",
            "jelly bean", "fudge", "toffee", "nougat", "turron", "praline",
            "truffle", "trufa", "bonbon", "mints", "mentas",
        ),
        True, ("AUPSA",),
    ),
    ProductPattern(
        "alimentos", "enlatados",
        (
            "canned food", "comida enlatada", "canned vegetables", "vegetales enlatados",
            "canned fruit", "fruta enlatada", "canned meat", "carne enlatada",
            "canned fish", "pescado enlatado", "tuna", "atun", "salmon", "sardines",
            "sardinas", "spam", "corned beef", "canned soup", "sopa enlatada",
            "canned beans", "frijoles enlatados", "tomato sauce", "salsa tomate",
            "pasta sauce", "salsa pasta", "coconut milk", "leche coco",
        ),
        True, ("AUPSA",),
    ),
    ProductPattern(
        "alimentos", "condimentos",
        (
            "sauce", "salsa", "ketchup", "mustard", "mostaza", "mayonnaise", "mayonesa",
            "hot sauce", "salsa picante", "soy sauce", "salsa soya", "vinegar", "vinagre",
            "olive oil", "aceite oliva", "cooking oil", "aceite cocina", "spice", "especia",
            "seasoning", "sazonador", "salt", "sal", "pepper", "pimienta", "herbs",
            "hierbas", "curry", "paprika", "pimenton", "cinnamon", "canela", "cumin",
            "comino", "oregano", "basil", "albahaca", "garlic powder", "ajo en polvo",
            "onion powder", "cebolla en polvo", "chili powder", "chile en polvo",
        ),
        True, ("AUPSA",),
    ),
    ProductPattern(
        "bebidas", "no_alcoholicas",
        (
            "drink", "bebida", "beverage", "soda", "refresco", "juice", "jugo",
            "water", "agua", "sparkling water", "agua mineral", "tea", "te",
            "coffee", "cafe", "energy drink", "bebida energetica", "sports drink",
            "bebida deportiva", "coconut water", "agua coco", "almond milk",
            "leche almendra", "oat milk", "leche avena", "soy milk", "leche soya",
            "protein shake", "batido proteina", "smoothie", "milkshake", "malteada",
        ),
        True, ("AUPSA",),
    ),

    # ═══════════════════════════════════════════
    #  COSMÉTICOS Y PERFUMERÍA
    # ═══════════════════════════════════════════
    ProductPattern(
        "cosmeticos", "maquillaje",
        (
            "makeup", "maquillaje", "foundation", "base", "concealer", "corrector",
            "powder", "polvo", "blush", "rubor", "bronzer", "bronceador", "highlighter",
            "iluminador", "contour", "eyeshadow", "sombra ojos", "eyeliner", "delineador",
            "mascara", "rimel", "eyebrow", "ceja", "lipstick", "labial", "lip gloss",
            "brillo labios", "lip liner", "delineador labios", "setting spray",
            "fijador", "primer", "prebase", "makeup brush", "brocha maquillaje",
            "sponge", "esponja", "beauty blender", "makeup remover", "desmaquillante",
        ),
    ),
    ProductPattern(
        "cosmeticos", "cuidado_piel",
        (
            "skincare", "cuidado piel", "cleanser", "limpiador", "face wash",
            "jabon facial", "toner", "tonico", "serum", "moisturizer", "hidratante",
            "cream", "crema", "lotion", "locion", "sunscreen", "protector solar",
            "spf", "anti aging", "antienvejecimiento", "wrinkle", "arrugas",
            "retinol", "vitamin c serum", "hyaluronic acid", "acido hialuronico",
            "niacinamide", "niacinamida", "salicylic acid", "acido salicilico",
            "glycolic acid", "acido glicolico", "exfoliant", "exfoliante", "mask",
            "mascarilla", "face mask", "mascarilla facial", "eye cream", "crema ojos",
            "lip balm", "balsamo labios", "acne", "pimple patch", "parche granitos",
        ),
    ),
    ProductPattern(
        "cosmeticos", "cabello",
        (
            "hair care", "cuidado cabello", "shampoo", "champu", "conditioner",
            "acondicionador", "hair mask", "mascarilla cabello", "hair oil",
            "aceite cabello", "leave in", "sin enjuague", "hair serum", "serum cabello",
            "hair spray", "laca", "gel", "mousse", "pomade", "pomada", "wax", "cera",
            "hair dye", "tinte cabello", "color", "bleach", "decolorante", "developer",
            "revelador", "hair treatment", "tratamiento cabello", "keratin", "keratina",
            "argan oil", "aceite argan", "coconut oil hair", "aceite coco cabello",
            "anti frizz", "anti encrespamiento", "volumizing", "voluminizador",
            "dry shampoo", "champu seco", "scalp treatment", "tratamiento cuero cabelludo",
        ),
    ),
    ProductPattern(
        "perfumeria", "fragancias",
        (
            "perfume", "parfum", "eau de toilette", "cologne", "colonia", "fragrance",
            "fragancia", "body mist", "spray corporal", "eau de parfum", "edp", "edt",
            "aftershave", "locion after shave", "scent", "aroma", "notes", "notas",
            "top notes", "heart notes", "base notes", "woody", "amaderado", "floral",
            "citrus", "citrico", "oriental", "fresh", "fresco", "musky", "almizcle",
            "chanel", "dior", "versace", "gucci", "armani", "ysl", "tom ford",
            "hugo boss", "dolce gabbana", "prada", "burberry",
        ),
    ),

    # ═══════════════════════════════════════════
    #  HOGAR
    # ═══════════════════════════════════════════
    ProductPattern(
        "hogar", "cocina",
        (
            "kitchen", "cocina", "cookware", "utensilios cocina", "pot", "olla",
            "pan", "sarten", "skillet", "wok", "baking", "hornear", "bakeware",
            "moldes", "mixing bowl", "tazon", "cutting board", "tabla cortar",
            "knife", "cuchillo", "knife set", "set cuchillos", "utensil", "utensilio",
            "spatula", "espatula", "ladle", "cucharon", "whisk", "batidor", "tongs",
            "pinzas", "peeler", "pelador", "grater", "rallador", "can opener",
            "abrelatas", "corkscrew", "sacacorchos", "measuring cup", "taza medidora",
            "food storage", "contenedor comida", "tupperware", "glass container",
            "contenedor vidrio", "water bottle", "botella agua", "thermos", "termo",
        ),
    ),
    ProductPattern(
        "hogar", "electrodomesticos",
        (
            "appliance", "electrodomestico", "blender", "licuadora", "mixer", "batidora",
            "food processor", "procesador alimentos", "juicer", "extractor jugo",
            "coffee maker", "cafetera", "espresso", "toaster", "tostadora", "microwave",
            "microondas", "air fryer", "freidora aire", "instant pot", "pressure cooker",
            "olla presion", "slow cooker", "olla lenta", "rice cooker", "arrocera",
            "electric kettle", "hervidor", "vacuum", "aspiradora", "robot vacuum",
            "robot aspiradora", "iron", "plancha", "steamer", "vaporizador", "fan",
            "ventilador", "heater", "calentador", "air conditioner", "aire acondicionado",
            "humidifier", "humidificador", "dehumidifier", "deshumidificador",
            "air purifier", "purificador aire",
        ),
    ),
    ProductPattern(
        "hogar", "decoracion",
        (
            "home decor", "decoracion hogar", "wall art", "arte pared", "painting",
            "pintura", "picture frame", "marco", "mirror", "espejo", "vase", "florero",
            "candle", "vela", "candle holder", "portavelas", "cushion", "cojin",
            "throw pillow", "almohada decorativa", "blanket", "manta", "throw blanket",
            "rug", "alfombra", "carpet", "tapete", "curtain", "cortina", "drape",
            "blind", "persiana", "lamp", "lampara", "light fixture", "luminaria",
            "chandelier", "candelabro", "string lights", "luces decorativas", "clock",
            "reloj", "wall clock", "reloj pared", "plant pot", "maceta", "planter",
            "jardinera", "sculpture", "escultura", "figurine", "figura",
        ),
    ),
    ProductPattern(
        "hogar", "cama_bano",
        (
            "bedding", "ropa cama", "sheet", "sabana", "pillowcase", "funda almohada",
            "duvet", "edredon", "comforter", "cobertor", "quilt", "colcha", "mattress",
            "colchon", "mattress protector", "protector colchon", "pillow", "almohada",
            "memory foam", "espuma memoria", "towel", "toalla", "bath towel",
            "toalla baño", "hand towel", "toalla mano", "washcloth", "toalla facial",
            "bathrobe", "bata baño", "bath mat", "tapete baño", "shower curtain",
            "cortina ducha", "soap dispenser", "dispensador jabon", "toothbrush holder",
            "porta cepillo", "bathroom organizer", "organizador baño",
        ),
    ),

    # ═══════════════════════════════════════════
    #  LIBROS Y OFICINA
    # ═══════════════════════════════════════════
    ProductPattern(
        "libros", "libros_general",
        (
            "book", "libro", "novel", "novela", "fiction", "ficcion", "non fiction",
            "no ficcion", "textbook", "libro texto", "workbook", "cuaderno trabajo",
            "cookbook", "libro cocina", "self help", "autoayuda", "biography", "biografia",
            "autobiography", "autobiografia", "history book", "libro historia",
            "science book", "libro ciencia", "art book", "libro arte", "photography book",
            "libro fotografia", "travel book", "libro viaje", "guide book", "guia",
            "dictionary", "diccionario", "encyclopedia", "enciclopedia", "magazine",
            "revista", "comic", "comic book", "manga", "graphic novel", "novela grafica",
            "children book", "libro niños", "coloring book", "libro colorear",
        ),
    ),
    ProductPattern(
        "oficina", "papeleria",
        (
            "office supplies", "articulos oficina", "paper", "papel", "notebook",
            "cuaderno", "journal", "diario", "planner", "agenda", "calendar", "calendario",
            "pen", "pluma", "boligrafo", "pencil", "lapiz", "marker", "marcador",
            "highlighter", "resaltador", "eraser", "borrador", "sharpener", "sacapuntas",
            "scissors", "tijeras", "tape", "cinta", "glue", "pegamento", "stapler",
            "engrapadora", "staples", "grapas", "paper clip", "clip", "binder", "carpeta",
            "folder", "funda", "envelope", "sobre", "label", "etiqueta", "post it",
            "nota adhesiva", "sticky note", "rubber band", "liga", "ruler", "regla",
        ),
    ),

    # ═══════════════════════════════════════════
    #  JUGUETES Y BEBES
    # ═══════════════════════════════════════════
    ProductPattern(
        "juguetes", "juguetes_general",
        (
            "toy", "juguete", "game", "juego", "puzzle", "rompecabezas", "board game",
            "juego mesa", "card game", "juego cartas", "lego", "building blocks",
            "bloques", "action figure", "figura accion", "doll", "muñeca", "barbie",
            "stuffed animal", "peluche", "plush", "teddy bear", "oso peluche",
            "remote control", "control remoto", "rc car", "carro control remoto",
            "drone toy", "nerf", "water gun", "pistola agua", "toy car", "carrito",
            "train set", "set tren", "playset", "educational toy", "juguete educativo",
            "stem toy", "sensory toy", "juguete sensorial", "fidget", "spinner",
        ),
    ),
    ProductPattern(
        "bebes", "cuidado_bebe",
        (
            "baby", "bebe", "infant", "infante", "newborn", "recien nacido", "diaper",
            "pañal", "wipes", "toallitas", "baby powder", "talco bebe", "baby lotion",
            "locion bebe", "baby oil", "aceite bebe", "baby shampoo", "champu bebe",
            "baby wash", "jabon bebe", "diaper cream", "crema pañal", "baby formula",
            "formula bebe", "bottle", "biberon", "nipple", "tetina", "pacifier", "chupon",
            "teether", "mordedor", "baby food", "comida bebe", "baby cereal",
            "cereal bebe", "sippy cup", "vaso entrenador", "baby spoon", "cuchara bebe",
        ),
        True, ("AUPSA",),
    ),
    ProductPattern(
        "bebes", "equipos_bebe",
        (
            "stroller", "coche bebe", "car seat", "silla auto", "baby carrier",
            "portabebe", "baby wrap", "fular", "crib", "cuna", "bassinet", "moises",
            "changing table", "cambiador", "baby monitor", "monitor bebe", "baby swing",
            "columpio bebe", "bouncer", "mecedora bebe", "high chair", "silla alta",
            "baby gate", "puerta seguridad", "playpen", "corral", "baby walker",
            "andadera", "baby gym", "gimnasio bebe", "activity mat", "tapete actividad",
        ),
    ),

    # ═══════════════════════════════════════════
    #  DEPORTES
    # ═══════════════════════════════════════════
    ProductPattern(
        "deportes", "fitness",
        (
            "fitness", "exercise", "ejercicio", "workout", "gym equipment",
            "equipo gimnasio", "dumbbell", "mancuerna", "barbell", "barra", "weight",
            "pesa", "kettlebell", "resistance band", "banda resistencia", "jump rope",
            "cuerda saltar", "yoga mat", "tapete yoga", "foam roller", "rodillo espuma",
            "exercise ball", "pelota ejercicio", "pull up bar", "barra dominadas",
            "push up", "flexiones", "ab roller", "rueda abdominales", "bench", "banco",
            "squat rack", "rack sentadillas", "treadmill", "caminadora", "elliptical",
            "eliptica", "stationary bike", "bicicleta estacionaria", "rowing machine",
            "maquina remo",
        ),
    ),
    ProductPattern(
        "deportes", "equipos_deportivos",
        (
            "sports equipment", "equipo deportivo", "ball", "balon", "pelota",
            "basketball", "balon basketball", "football", "balon futbol americano",
            "soccer ball", "balon futbol", "volleyball", "balon voleibol", "baseball",
            "pelota beisbol", "glove", "guante", "bat", "bate", "racket", "raqueta",
            "tennis racket", "raqueta tenis", "badminton", "ping pong", "paddle",
            "pala", "golf club", "palo golf", "golf ball", "pelota golf", "hockey stick",
            "stick hockey", "skateboard", "patineta", "roller skates", "patines",
            "helmet", "casco", "protective gear", "proteccion", "knee pad", "rodillera",
            "elbow pad", "codera",
        ),
    ),
    ProductPattern(
        "deportes", "outdoor",
        (
            "outdoor", "exteriores", "camping", "tent", "tienda campaña", "sleeping bag",
            "saco dormir", "backpack hiking", "mochila senderismo", "hiking", "senderismo",
            "trekking", "climbing", "escalada", "fishing", "pesca", "fishing rod",
            "caña pesca", "tackle", "aparejos", "cooler", "hielera", "thermos", "termo",
            "lantern", "linterna", "flashlight", "compass", "brujula", "binoculars",
            "binoculares", "hammock", "hamaca", "portable chair", "silla portatil",
            "canopy", "toldo", "grill", "parrilla", "bbq", "charcoal", "carbon",
        ),
    ),

    # ═══════════════════════════════════════════
    #  HERRAMIENTAS Y AUTOMOTRIZ
    # ═══════════════════════════════════════════
    ProductPattern(
        "herramientas", "manuales",
        (
            "tool", "herramienta", "hand tool", "herramienta manual", "hammer", "martillo",
            "screwdriver", "destornillador", "wrench", "llave", "pliers", "pinzas",
            "alicates", "socket", "dado", "ratchet", "trinquete", "allen key", "llave allen",
            "hex key", "tape measure", "cinta metrica", "level", "nivel", "saw", "sierra",
            "handsaw", "serrucho", "utility knife", "cutter", "chisel", "cincel",
            "file", "lima", "sandpaper", "lija", "clamp", "prensa", "toolbox",
            "caja herramientas", "tool set", "set herramientas",
        ),
    ),
    ProductPattern(
        "herramientas", "electricas",
        (
            "power tool", "herramienta electrica", "drill", "taladro", "impact driver",
            "atornillador impacto", "circular saw", "sierra circular", "jigsaw",
            "sierra caladora", "reciprocating saw", "sierra sable", "miter saw",
            "sierra inglete", "table saw", "sierra mesa", "sander", "lijadora",
            "orbital sander", "belt sander", "grinder", "esmeril", "angle grinder",
            "amoladora", "router", "fresadora", "heat gun", "pistola calor", "soldering iron",
            "cautin", "welder", "soldadora", "compressor", "compresor", "nail gun",
            "pistola clavos", "staple gun", "engrapadora industrial",
        ),
    ),
    ProductPattern(
        "automotriz", "partes",
        (
            "car parts", "partes auto", "auto parts", "refacciones", "oil filter",
            "filtro aceite", "air filter", "filtro aire", "spark plug", "bujia",
            "brake pad", "pastilla freno", "brake disc", "disco freno", "battery",
            "bateria", "alternator", "alternador", "starter", "arranque", "radiator",
            "radiador", "thermostat", "termostato", "water pump", "bomba agua",
            "fuel pump", "bomba combustible", "timing belt", "correa tiempo",
            "serpentine belt", "correa serpentin", "shock absorber", "amortiguador",
            "strut", "muelle", "control arm", "brazo control", "ball joint",
            "rotula", "tie rod", "barra direccion", "cv joint", "junta homocinetica",
            "wheel bearing", "rodamiento rueda", "hub", "maza", "axle", "eje",
        ),
    ),
    ProductPattern(
        "automotriz", "accesorios_auto",
        (
            "car accessories", "accesorios auto", "floor mat", "tapete", "seat cover",
            "funda asiento", "steering wheel cover", "funda volante", "sun shade",
            "parasol", "dash cam", "camara tablero", "gps", "navigation", "navegacion",
            "bluetooth adapter", "car charger", "cargador auto", "phone mount",
            "soporte celular", "air freshener", "aromatizante", "car wash", "lavado auto",
            "wax", "cera auto", "polish", "pulidor", "tire shine", "brillo llantas",
            "jump starter", "arrancador", "tire inflator", "inflador", "car cover",
            "funda auto", "license plate frame", "marco placa",
        ),
    ),

    # ═══════════════════════════════════════════
    #  JOYERÍA
    # ═══════════════════════════════════════════
    ProductPattern(
        "joyeria", "joyas",
        (
            "jewelry", "joyeria", "jewellery", "necklace", "collar", "chain", "cadena",
            "pendant", "dije", "bracelet", "pulsera", "bangle", "brazalete", "ring",
            "anillo", "earring", "arete", "hoop earring", "argolla", "stud", "stud earring",
            "brooch", "broche", "anklet", "tobillera", "body jewelry", "piercing",
            "nose ring", "aro nariz", "belly button ring", "aro ombligo", "charm",
            "dije", "locket", "relicario", "engagement ring", "anillo compromiso",
            "wedding band", "argolla matrimonio", "diamond", "diamante", "gold", "oro",
            "silver", "plata", "platinum", "platino", "rose gold", "oro rosa",
            "sterling silver", "plata esterlina", "cubic zirconia", "pearl", "perla",
            "gemstone", "piedra preciosa", "ruby", "rubi", "emerald", "esmeralda",
            "sapphire", "zafiro", "amethyst", "amatista", "topaz", "topacio",
        ),
    ),
    ProductPattern(
        "joyeria", "relojes",
        (
            "watch", "reloj", "wristwatch", "reloj pulsera", "analog watch",
            "reloj analogo", "digital watch", "reloj digital", "luxury watch",
            "reloj lujo", "dress watch", "reloj vestir", "dive watch", "reloj buceo",
            "chronograph", "cronografo", "automatic", "automatico", "mechanical",
            "mecanico", "quartz", "cuarzo", "watch band", "correa reloj", "watch strap",
            "leather strap", "correa cuero", "metal band", "correa metal", "silicone band",
            "correa silicona", "rolex", "omega", "tag heuer", "seiko", "citizen",
            "casio", "fossil", "michael kors", "tissot", "movado",
        ),
    ),

    # ═══════════════════════════════════════════
    #  DOCUMENTOS
    # ═══════════════════════════════════════════
    ProductPattern(
        "documentos", "documentos",
        (
            "document", "documento", "paper", "papel", "letter", "carta", "contract",
            "contrato", "legal document", "documento legal", "certificate", "certificado",
            "diploma", "degree", "titulo", "transcript", "expediente", "invoice", "factura",
            "receipt", "recibo", "bill", "cuenta", "statement", "estado cuenta",
            "tax document", "documento fiscal", "passport copy", "copia pasaporte",
            "id copy", "copia identificacion", "birth certificate", "acta nacimiento",
            "marriage certificate", "acta matrimonio", "medical record", "expediente medico",
            "correspondence", "correspondencia", "mail", "correo", "parcel", "paquete",
        ),
    ),

    # ═══════════════════════════════════════════
    #  PRODUCTOS PROHIBIDOS O RESTRINGIDOS
    # ═══════════════════════════════════════════
    ProductPattern(
        "seguridad", "armas",
        (
            "weapon", "arma", "gun", "pistola", "firearm", "arma fuego", "rifle",
            "shotgun", "escopeta", "ammunition", "municion", "bullet", "bala",
            "cartridge", "cartucho", "handgun", "revolver", "holster", "funda pistola",
            "magazine", "cargador", "scope", "mira", "suppressor", "silenciador",
            "stun gun", "taser", "pepper spray", "gas pimienta", "knife tactical",
            "cuchillo tactico", "switchblade", "navaja automatica", "brass knuckles",
            "nudilleras", "baton", "baston policia", "handcuffs", "esposas",
            "crossbow", "ballesta", "bb gun", "airsoft", "paintball",
        ),
        True, ("MINGOB", "SINAPROC"),
        ("Requiere permiso especial", "Verificar legalidad", "Posible producto prohibido"),
    ),
)


PROHIBITED_KEYWORDS: Tuple[str, ...] = (
    # drogas y estupefacientes
    "cocaine", "cocaina", "heroin", "heroina", "marijuana", "marihuana", "cannabis",
    "meth", "methamphetamine", "metanfetamina", "ecstasy", "lsd", "psilocybin",
    "ketamine", "ketamina", "fentanyl", "fentanilo", "opium", "opio",
    # explosivos
    "explosive", "explosivo", "dynamite", "dinamita", "grenade", "granada",
    "bomb", "bomba", "detonator", "detonador", "fireworks illegal", "c4", "tnt",
    # material peligroso
    "radioactive", "radiactivo", "toxic waste", "desecho toxico", "biohazard",
    "biopeligroso", "chemical weapon", "arma quimica",
    # fauna y flora protegida
    "ivory", "marfil", "endangered species", "especie peligro", "exotic animal",
    "animal exotico", "protected plant", "planta protegida", "coral",
    # falsificaciones
    "counterfeit", "falsificado", "fake currency", "moneda falsa", "pirated",
    "pirateado", "bootleg", "replica weapon", "replica arma",
)

DOCUMENT_KEYWORDS: Tuple[str, ...] = (
    "document", "documento", "paper", "papel", "letter", "carta",
    "contract", "contrato", "certificate", "certificado", "invoice",
    "factura", "receipt", "recibo", "correspondence", "correspondencia",
)

CATEGORY_NAMES: Dict[str, str] = {
    "medicamentos": "Medicamentos",
    "suplementos": "Suplementos y Vitaminas",
    "productos_medicos": "Productos Médicos",
    "veterinarios": "Productos Veterinarios",
    "electronica": "Electrónica",
    "computacion": "Computación",
    "telefonia": "Telefonía",
    "ropa": "Ropa y Vestimenta",
    "calzado": "Calzado",
    "accesorios": "Accesorios",
    "alimentos": "Alimentos",
    "bebidas": "Bebidas",
    "cosmeticos": "Cosméticos",
    "perfumeria": "Perfumería",
    "libros": "Libros y Publicaciones",
    "juguetes": "Juguetes",
    "deportes": "Deportes",
    "hogar": "Hogar",
    "herramientas": "Herramientas",
    "automotriz": "Automotriz",
    "joyeria": "Joyería y Relojes",
    "instrumentos": "Instrumentos Musicales",
    "arte": "Arte y Artesanías",
    "mascotas": "Mascotas",
    "bebes": "Bebés",
    "oficina": "Oficina",
    "jardineria": "Jardinería",
    "seguridad": "Seguridad (Restringido)",
    "documentos": "Documentos",
    "general": "Mercancía General",
}

BRACKET_NAMES: Dict[str, str] = {
    "A": "Categoría A - Documentos",
    "B": "Categoría B - De Minimis (≤$100)",
    "C": "Categoría C - Bajo Valor ($100-$2,000)",
    "D": "Categoría D - Alto Valor (≥$2,000)",
}
