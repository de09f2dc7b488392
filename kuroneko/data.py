from collections import namedtuple

DetailRecord = namedtuple('DetailRecord', 'status date time location code')
DetailRecord.__doc__ = """One row of a shipment's history: the status text, the
date and time it happened, the handling branch and the branch code.
"""

ItemRecord = namedtuple('ItemRecord', 'item date name')
ItemRecord.__doc__ = """One row of the item summary used by the newer result
pages: the item type, the scheduled date and the recipient name.
"""

class ShipmentBlock(dict):
    """Everything shown for one shipment: the header lines (tracking number,
    status summary), an optional enumeration label such as "1件目" and the
    detail rows.
    """

    _repr_template = '<ShipmentBlock(label={b.label!r}, headers={b.headers!r}, rows={rows})>'

    def __init__(self, headers=None, rows=None, label=None, **kwargs):
        self.headers = list(headers or [])
        self.rows = list(rows or [])
        self.label = label
        self.update(kwargs)

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, val):
        self[name] = val

    def __repr__(self):
        return self._repr_template.format(b=self, rows=len(self.rows))

    @property
    def has_detail(self):
        """True when this block carries a label or at least one row
        """
        return bool(self.label) or bool(self.rows)

class TrackingResult(dict):
    """Tracking information returned by a tracking request, one block per
    shipment in the order the service returned them
    """

    _repr_template = '<TrackingResult(tracking_numbers={i.tracking_numbers!r}, blocks={blocks})>'

    def __init__(self, tracking_numbers, blocks=None, **kwargs):
        self.tracking_numbers = list(tracking_numbers)
        self.blocks = list(blocks or [])
        self.update(kwargs)

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, val):
        self[name] = val

    def __repr__(self):
        return self._repr_template.format(i=self, blocks=len(self.blocks))

    def add_block(self, block):
        self.blocks.append(block)
        return block
