from typing import List, Optional, Set, Tuple, Union, Iterator


# Make scalar string or container of strings iterable, None yields nothing...
def str_iter(strings: Optional[Union[str, List[str], Set[str], Tuple[str, ...]]]) -> Iterator[str]:
    if strings is None:
        return
    if isinstance(strings, (list, set, tuple)):
        for v in strings:
            assert isinstance(v, str)
            yield v
    else:
        assert isinstance(strings, str)
        yield strings
