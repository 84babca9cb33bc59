#!/usr/bin/env python3
"""
Basic usage examples for the XAPI SDK.

This script demonstrates how to use the SDK to read and create business
objects on an XAPI server. Connection settings come from the XAPI_URI,
XAPI_PUBLIC_KEY and XAPI_PRIVATE_KEY environment variables.
"""

import logging
import sys

from xapi_sdk import (
    CausaleContabile,
    ClientFactory,
    Contatto,
    NaturaGiuridica,
    XAPIError,
    XAPISdkConfiguration,
    build_resource_path,
    build_uri,
    format_timestamp,
    sign,
)


def main():
    """Run basic usage examples."""

    logging.basicConfig(level=logging.INFO)

    try:
        conf = XAPISdkConfiguration.from_env(logger=logging.getLogger("xapi_sdk"))
    except XAPIError as e:
        print(f"Configuration error: {e}")
        print("Set XAPI_URI, XAPI_PUBLIC_KEY and XAPI_PRIVATE_KEY")
        return 1

    print("=== XAPI SDK Basic Usage Examples ===\n")

    # Example 1: signing without network access
    print("1. Signing a request...")
    resource_path = build_resource_path(Contatto.RESOURCE_NAME, "42")
    timestamp = format_timestamp()
    print(f"   URI: {build_uri(conf.xapi_uri, resource_path)}")
    print(f"   Timestamp: {timestamp}")
    print(f"   Signature: {sign(resource_path, conf.public_key, conf.private_key, timestamp)}\n")

    factory = ClientFactory(conf)

    try:
        # Example 2: listing with a filter
        print("2. Listing causali contabili...")
        with factory.client_for(CausaleContabile) as client:
            causali = client.list_all()
            print(f"   ✓ {len(causali)} causali contabili")
            for causale in causali[:5]:
                print(f"   - {causale.codice}: {causale.descrizione}")
        print()

        # Example 3: get by id and related resource
        print("3. Fetching a contact and its natura giuridica...")
        with factory.client_for(Contatto) as client:
            contatti = client.list_all()
            if contatti and contatti[0].id is not None:
                contatto = client.get(contatti[0].id)
                print(f"   ✓ {contatto.ragione_sociale}")
                natura = contatto.get_natura_giuridica()
                if natura is not None:
                    print(f"   Natura giuridica: {natura.nome}")
            else:
                print("   No contacts on the server")
        print()

        # Example 4: creating an object
        print("4. Creating a natura giuridica...")
        with factory.client_for(NaturaGiuridica) as client:
            created = client.add(NaturaGiuridica(nome="S.r.l.s.", descrizione="S.r.l. semplificata"))
            print(f"   ✓ Created: {created}")

    except XAPIError as e:
        print(f"   ✗ XAPI error: {e}")
        return 1

    print("\n=== Examples completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
