"""Species covered by the Fireworks layout."""

SPECIES: tuple[str, ...] = (
    "Bos_taurus",
    "Caenorhabditis_elegans",
    "Canis_familiaris",
    "Danio_rerio",
    "Dictyostelium_discoideum",
    "Drosophila_melanogaster",
    "Gallus_gallus",
    "Homo_sapiens",
    "Mus_musculus",
    "Mycobacterium_tuberculosis",
    "Plasmodium_falciparum",
    "Rattus_norvegicus",
    "Saccharomyces_cerevisiae",
    "Schizosaccharomyces_pombe",
    "Sus_scrofa",
    "Xenopus_tropicalis",
)

JSON_SUFFIX = ".json"


def expected_file_name(species: str) -> str:
    """Name of the layout file written for a species."""
    return species + JSON_SUFFIX


def expected_file_names() -> list[str]:
    return [expected_file_name(species) for species in SPECIES]
