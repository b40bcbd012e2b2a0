import pandas


def convert_csv_file(path, **kwargs):
    """Read a CSV file with a header line into a list of named rows"""
    return pandas.read_csv(path, **kwargs).to_dict("records")


def convert_json_file(path, **kwargs):
    """Read a JSON array of objects into a list of named rows"""
    return pandas.read_json(path, orient="records", **kwargs).to_dict("records")


file_converters = {
    "csv": convert_csv_file,
    "json": convert_json_file,
}


def convert_table_file(path):
    """pick a converter from the file extension, ``.gz`` is looked through"""
    name = path[: -len(".gz")] if path.endswith(".gz") else path
    theformat = name.rsplit(".", 1)[-1].lower()
    if theformat not in file_converters:
        raise ValueError(
            "Unknown table format for {}, expected one of: {}".format(
                path, ", ".join(file_converters)
            )
        )
    return file_converters[theformat](path)
