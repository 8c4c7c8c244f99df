"""
Static bilingual vocabulary.

Seed data for the Nahuatl ⇄ Spanish lexicon and the word-detail reference.
Entry order is significant: fuzzy matching scans terms in this order and
keeps the first minimum, so ties resolve toward earlier entries.

The `Vocabulary` object is built once at startup and handed to the lexicon
and reference builders. Nothing mutates it afterwards.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class DictionaryEntry:
    source_word: str  # nahuatl
    target_word: str  # spanish


@dataclass(frozen=True)
class WordDetail:
    word: str
    meaning: str
    part_of_speech: str
    etymology: str | None = None
    example: str | None = None
    synonyms: tuple[str, ...] = ()
    related: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "meaning": self.meaning,
            "part_of_speech": self.part_of_speech,
            "etymology": self.etymology,
            "example": self.example,
            "synonyms": list(self.synonyms),
            "related": list(self.related),
        }


@dataclass(frozen=True)
class Vocabulary:
    entries: tuple[DictionaryEntry, ...]
    details: Mapping[str, WordDetail] = field(default_factory=dict)

    @classmethod
    def build(cls, pairs, details: dict[str, WordDetail]) -> "Vocabulary":
        """Freeze seed pairs and details. Later duplicate detail keys win."""
        entries = tuple(DictionaryEntry(w, t) for w, t in pairs)
        frozen = {key.lower(): detail for key, detail in details.items()}
        return cls(entries=entries, details=MappingProxyType(frozen))


SEED_ENTRIES = [
    ("pialli", "hola"),
    ("cualli tonalli", "buenos dias"),
    ("tlazocamati", "gracias"),
    ("atl", "agua"),
    ("tletl", "fuego"),
    ("tlalli", "tierra"),
    ("xochitl", "flor"),
    ("calli", "casa"),
    ("chichi", "perro"),
    ("itzcuintli", "perro"),
    ("miztli", "gato"),
    ("tlazohtlaliztli", "amor"),
    ("tonatiuh", "sol"),
    ("metztli", "luna"),
    ("yollotl", "corazon"),
    ("nantli", "madre"),
    ("tahtli", "padre"),
    ("pilli", "niño"),
    ("nemiliztli", "vida"),
    ("miquiztli", "muerte"),
    ("tepetl", "montaña"),
    ("ehecatl", "viento"),
    ("cihuatl", "mujer"),
    ("tlacatl", "hombre"),
]


def _d(word, meaning, pos, etymology=None, example=None, synonyms=(), related=()):
    return WordDetail(word, meaning, pos, etymology, example, tuple(synonyms), tuple(related))


SEED_DETAILS = {
    # nahuatl
    "pialli": _d(
        "Pialli", "Hola / Saludo", "Interjección",
        "Derivado del verbo 'pia' (tener/guardar/custodiar). Literalmente 'lo tienes'.",
        "Pialli, ¿quenin tica?",
        synonyms=["Niltze", "Hao"],
        related=["Tlahpaloliztli (Saludo)"],
    ),
    "cualli": _d(
        "Cualli", "Bueno / Aceptable / Algo que se puede comer o asimilar", "Adjetivo",
        "De 'cualo' (lo que es comido/asimilable).",
        "Cualli tonalli",
        synonyms=["Yectli"],
        related=["Cualnezqui (Bonito)"],
    ),
    "tonalli": _d(
        "Tonalli", "Día / Sol / Destino / Calor solar", "Sustantivo",
        "Raíz 'tona' (hacer calor/sol). Se refiere a la energía solar y el destino.",
        "Ce cualli tonalli",
        related=["Tonatiuh", "Tonalpohualli"],
    ),
    "tlazocamati": _d(
        "Tlazocamati", "Gracias", "Interjección",
        "Literalmente 'se aprecia con amor' (tlazohtla: amar).",
        "Tlazocamati huel miac",
        synonyms=["Ompa nimitztlazocamachilia"],
    ),
    "atl": _d(
        "Atl", "Agua / Líquido vital", "Sustantivo",
        "Elemento primario en la cosmovisión nahua.",
        "In atl, in tepetl (El agua, el cerro = La ciudad)",
        related=["Ameyalli (Manantial)", "Atepetl"],
    ),
    "tletl": _d("Tletl", "Fuego", "Sustantivo", "Energía transformadora.", "Xikpoa in tletl",
                related=["Tlecuil (Fogón)"]),
    "tlalli": _d("Tlalli", "Tierra", "Sustantivo", "Madre tierra, suelo.",
                 "Tlalli iyollo (Corazón de la tierra)", related=["Milli (Campo)"]),
    "xochitl": _d("Xochitl", "Flor", "Sustantivo", "Símbolo de belleza, arte y efimeridad.",
                  "In xochitl, in cuicatl (Flor y canto = Poesía)",
                  related=["Xochipilli", "Xochimilco"]),
    "calli": _d("Calli", "Casa", "Sustantivo", "Estructura que resguarda.", "No cal (Mi casa)",
                synonyms=["Chantli (Hogar)"]),
    "chichi": _d(
        "Chichi", "Perro", "Sustantivo",
        "Posiblemente onomatopéyico (chi-chi) o coloquial.",
        "In chichi choca",
        synonyms=["Itzcuintli (Término formal/genérico)"],
        related=["Xoloitzcuintli"],
    ),
    "itzcuintli": _d(
        "Itzcuintli", "Perro (Término formal)", "Sustantivo",
        "De 'itz' (navaja/diente) y 'cuintli' (diente/morder).",
        "Itzcuintli tlacua",
        synonyms=["Chichi"],
    ),
    "miztli": _d("Miztli", "Gato / Felino", "Sustantivo",
                 "Felino. Relacionado con puma (miztli).", "Mizton (Gatito)",
                 synonyms=["Mizton"]),
    "tlazohtlaliztli": _d("Tlazohtlaliztli", "Amor", "Sustantivo",
                          "Sustantivación del verbo 'tlazohtla' (amar).",
                          "Nimitztlazohtla (Te amo)"),
    "tonatiuh": _d("Tonatiuh", "Sol", "Sustantivo",
                   "El que va brillando / El que va calentando.",
                   "Tonatiuh ilhuicac (Sol en el cielo)", related=["Tonalli"]),
    "metztli": _d("Metztli", "Luna", "Sustantivo",
                  "También significa 'pierna' en algunos contextos, pero aquí es el astro.",
                  "Metztli yohualli (Luna nocturna)"),
    "yollotl": _d("Yollotl", "Corazón", "Sustantivo",
                  "Raíz 'yollo' (vida/movimiento). Centro de la voluntad.",
                  "Noyollo (Mi corazón)"),
    "nantli": _d("Nantli", "Madre", "Sustantivo", "Concepto de origen.", "Nonan (Mi madre)",
                 synonyms=["Tonantzin (Nuestra madrecita)"]),
    "tahtli": _d("Tahtli", "Padre", "Sustantivo", "Figura paterna.", "Notah (Mi padre)"),
    "pilli": _d("Pilli", "Niño / Noble", "Sustantivo",
                "Polisémico: puede significar hijo pequeño o persona de la nobleza.",
                "Nopiltzin (Mi amado hijo/Señor)", synonyms=["Conetl (Niño pequeño)"]),
    "nemiliztli": _d("Nemiliztli", "Vida / Historia / Costumbre", "Sustantivo",
                     "Del verbo 'nemi' (vivir/habitar).", "Cualli nemiliztli (Buena vida)",
                     synonyms=["Yoliliztli"]),
    "miquiztli": _d("Miquiztli", "Muerte", "Sustantivo",
                    "Del verbo 'miqui' (morir). Signo del calendario.",
                    "Miquiztli in tonalli"),
    "tepetl": _d("Tepetl", "Montaña / Cerro", "Sustantivo", "Lugar alto/poblado.",
                 "Popocatepetl (Montaña que humea)", related=["Altepetl (Pueblo)"]),
    "ehecatl": _d("Ehecatl", "Viento / Aire", "Sustantivo", "Aliento divino/aire.",
                  "Ehecatl quihualica (El viento lo trae)"),
    "cihuatl": _d("Cihuatl", "Mujer", "Sustantivo", "Femenino.",
                  "Cihuatl tlamatini (Mujer sabia)", synonyms=["Ichpochtli (Joven)"]),
    "tlacatl": _d("Tlacatl", "Hombre / Persona / Ser Humano", "Sustantivo",
                  "Ser humano (genérico).", "Ce tlacatl (Una persona)",
                  synonyms=["Oquichtli (Varón)"]),

    # spanish, for reverse lookups
    "hola": _d("Hola", "Saludo", "Interjección",
               "Posiblemente del inglés 'hello' o alemán 'hallo', o expresivo.",
               "Hola, ¿cómo estás?", synonyms=["Saludos", "Buen día"]),
    "buenos": _d("Buenos", "Adjetivo de cualidad positiva", "Adjetivo",
                 "Del latín 'bonus'.", "Buenos días"),
    "dias": _d("Días", "Período de 24 horas", "Sustantivo", "Del latín 'dies'.",
               "Buenos días tengan todos"),
    "gracias": _d("Gracias", "Expresión de agradecimiento", "Interjección",
                  "Del latín 'gratia' (favor/cualidad agradable).",
                  "Muchas gracias por todo", synonyms=["Agradecido"]),
    "agua": _d("Agua", "Sustancia líquida (H2O)", "Sustantivo", "Del latín 'aqua'.",
               "Beber agua pura", related=["Líquido", "Hidratación"]),
    "fuego": _d("Fuego", "Combustión / Calor y luz", "Sustantivo",
                "Del latín 'focus' (hogar/fogón).", "El fuego calienta",
                synonyms=["Lumbre", "Incendio"]),
    "tierra": _d("Tierra", "Planeta / Suelo", "Sustantivo", "Del latín 'terra'.",
                 "Trabajar la tierra", synonyms=["Suelo", "Terreno"]),
    "flor": _d("Flor", "Estructura reproductiva planta", "Sustantivo",
               "Del latín 'flos, floris'.", "Una flor roja"),
    "casa": _d("Casa", "Edificio para habitar", "Sustantivo", "Del latín 'casa' (choza).",
               "Voy a casa", synonyms=["Hogar", "Vivienda", "Domicilio"]),
    "perro": _d("Perro", "Mamífero doméstico", "Sustantivo",
                "Incierta, exclusivo del castellano.", "El perro ladra",
                synonyms=["Can", "Chucho"]),
    "gato": _d("Gato", "Felino doméstico", "Sustantivo", "Del latín tardío 'cattus'.",
               "El gato maúlla", synonyms=["Minino", "Felino"]),
    "amor": _d("Amor", "Sentimiento de afecto", "Sustantivo", "Del latín 'amor'.",
               "Amor verdadero", synonyms=["Cariño", "Afecto", "Pasión"]),
    "sol": _d("Sol", "Estrella central", "Sustantivo", "Del latín 'sol'.", "El sol brilla",
              related=["Luz", "Día"]),
    "luna": _d("Luna", "Satélite natural", "Sustantivo", "Del latín 'luna' (luminosa).",
               "Luna llena", related=["Noche", "Satélite"]),
    "corazon": _d("Corazón", "Órgano vital / Centro", "Sustantivo",
                  "Del latín 'cor, cordis'.", "Me duele el corazón"),
    "madre": _d("Madre", "Progenitora femenina", "Sustantivo", "Del latín 'mater'.",
                "Amor de madre", synonyms=["Mamá"]),
    "padre": _d("Padre", "Progenitor masculino", "Sustantivo", "Del latín 'pater'.",
                "Padre de familia", synonyms=["Papá"]),
    "niño": _d("Niño", "Persona de corta edad", "Sustantivo", "Voz expresiva infantil.",
               "El niño juega", synonyms=["Chico", "Infante"]),
    "vida": _d("Vida", "Existencia", "Sustantivo", "Del latín 'vita'.", "La vida es bella",
               synonyms=["Existencia"]),
    "muerte": _d("Muerte", "Fin de la vida", "Sustantivo", "Del latín 'mors, mortis'.",
                 "Vida y muerte", synonyms=["Fallecimiento", "Deceso"]),
    "montaña": _d("Montaña", "Elevación natural", "Sustantivo", "De 'monte'.",
                  "Subir la montaña", synonyms=["Monte", "Cerro"]),
    "viento": _d("Viento", "Corriente de aire", "Sustantivo", "Del latín 'ventus'.",
                 "Viento del norte", synonyms=["Aire", "Brisca"]),
    "mujer": _d("Mujer", "Persona adulta femenina", "Sustantivo", "Del latín 'mulier'.",
                "Mujer trabajadora", synonyms=["Dama", "Señora"]),
    "hombre": _d("Hombre", "Ser humano / Varón", "Sustantivo", "Del latín 'homo'.",
                 "El hombre piensa", synonyms=["Varón", "Caballero"]),
}


DEFAULT_VOCABULARY = Vocabulary.build(SEED_ENTRIES, SEED_DETAILS)
