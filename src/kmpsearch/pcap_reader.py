"""
pcap_reader.py
---------------
Searches TCP payloads of a PCAP file for a byte pattern.

This module:
- Uses dpkt for packet parsing
- Extracts IPv4/IPv6 TCP payloads (no reassembly, each packet is searched alone)
- Runs the KMP matcher over each payload, bytes are the alphabet
"""

import logging
import socket
from typing import Generator, List, Tuple, Union

import dpkt

from kmpsearch.matcher.kmp import search
from kmpsearch.normalizer import normalize_symbols

logger = logging.getLogger(__name__)


def inet_to_str(inet) -> str:
    """Convert inet object to a string (IPv4 or IPv6)."""
    try:
        return socket.inet_ntop(socket.AF_INET, inet)
    except ValueError:
        return socket.inet_ntop(socket.AF_INET6, inet)


def extract_tcp_payloads_from_pcap(pcap_path: str) -> Generator[Tuple[dict, bytes], None, None]:
    """
    Yield (metadata_dict, raw_payload_bytes) for each TCP packet payload.

    metadata = {
        "src": ip,
        "dst": ip,
        "sport": port,
        "dport": port,
        "timestamp": ts
    }

    Packets without a TCP payload are skipped.
    """

    with open(pcap_path, "rb") as f:
        pcap = dpkt.pcap.Reader(f)

        for idx, (ts, buf) in enumerate(pcap):
            try:
                eth = dpkt.ethernet.Ethernet(buf)
            except (dpkt.dpkt.NeedData, dpkt.dpkt.UnpackError) as e:
                logger.debug("frame %d: not ethernet (%s), skipped", idx, e)
                continue

            ip = eth.data
            if not isinstance(ip, (dpkt.ip.IP, dpkt.ip6.IP6)):
                continue

            if not isinstance(ip.data, dpkt.tcp.TCP):
                continue

            tcp = ip.data
            if len(tcp.data) == 0:
                continue

            metadata = {
                "src": inet_to_str(ip.src),
                "dst": inet_to_str(ip.dst),
                "sport": tcp.sport,
                "dport": tcp.dport,
                "timestamp": ts
            }

            yield metadata, bytes(tcp.data)


def scan_pcap(pcap_path: str, pattern: Union[bytes, str], *, nocase: bool = False) -> List[dict]:
    """
    Search every TCP payload of the capture for pattern.

    Returns one hit per packet that contains the pattern:
        {**metadata, "packet": index, "offsets": [start, ...]}
    With nocase, payload and pattern are both lower-cased latin1 text.
    """
    if nocase or isinstance(pattern, str):
        needle = normalize_symbols(pattern, to_lower=nocase)
    else:
        needle = bytes(pattern)

    hits = []
    for idx, (metadata, payload) in enumerate(extract_tcp_payloads_from_pcap(pcap_path)):
        if isinstance(needle, str):
            haystack = normalize_symbols(payload, to_lower=nocase)
        else:
            haystack = payload

        offsets = search(haystack, needle)
        if not offsets:
            continue

        logger.debug("packet %d %s:%s -> %s:%s: %d match(es)", idx, metadata["src"],
                     metadata["sport"], metadata["dst"], metadata["dport"], len(offsets))
        hit = dict(metadata)
        hit["packet"] = idx
        hit["offsets"] = offsets
        hits.append(hit)

    logger.info("%s: %d packet(s) matched", pcap_path, len(hits))
    return hits
